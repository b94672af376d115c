"""Tests for include resolution against a scanned corpus."""

from include_cost.graph.models import ExternalPlaceholder
from include_cost.graph.resolver import IncludeResolver
from include_cost.scanning.models import IncludeDirective


def _inc(path, system=False):
    return IncludeDirective(path=path, system=system)


class TestUniqueNames:
    def test_base_name_match(self, make_file):
        resolver = IncludeResolver([make_file("lib/core/util.h"), make_file("app/main.cpp")])
        assert resolver.resolve(_inc("util.h"), "app/main.cpp") == "lib/core/util.h"

    def test_directory_part_ignored_for_unique_name(self, make_file):
        resolver = IncludeResolver([make_file("lib/util.h"), make_file("main.cpp")])
        assert resolver.resolve(_inc("core/util.h"), "main.cpp") == "lib/util.h"

    def test_angle_brackets_resolve_the_same(self, make_file):
        resolver = IncludeResolver([make_file("inc/config.h"), make_file("main.cpp")])
        assert resolver.resolve(_inc("config.h", system=True), "main.cpp") == "inc/config.h"

    def test_backslashes_normalized(self, make_file):
        resolver = IncludeResolver([make_file("a/b/c.h"), make_file("m.cpp")])
        assert resolver.resolve(_inc("b\\c.h"), "m.cpp") == "a/b/c.h"


class TestAmbiguousNames:
    def _corpus(self, make_file):
        return [
            make_file("engine/render/types.h"),
            make_file("engine/audio/types.h"),
            make_file("engine/audio/mixer.cpp"),
            make_file("engine/net/socket.cpp"),
        ]

    def test_same_directory_preferred(self, make_file):
        resolver = IncludeResolver(self._corpus(make_file))
        assert resolver.resolve(_inc("types.h"), "engine/audio/mixer.cpp") == "engine/audio/types.h"

    def test_relative_parent_path(self, make_file):
        resolver = IncludeResolver(self._corpus(make_file))
        target = resolver.resolve(_inc("../render/types.h"), "engine/audio/mixer.cpp")
        assert target == "engine/render/types.h"

    def test_path_suffix_match(self, make_file):
        resolver = IncludeResolver(self._corpus(make_file))
        target = resolver.resolve(_inc("render/types.h"), "engine/net/socket.cpp")
        assert target == "engine/render/types.h"

    def test_lexicographic_fallback(self, make_file):
        resolver = IncludeResolver(self._corpus(make_file))
        assert resolver.resolve(_inc("types.h"), "engine/net/socket.cpp") == "engine/audio/types.h"

    def test_input_order_irrelevant(self, make_file):
        forward = IncludeResolver(self._corpus(make_file))
        backward = IncludeResolver(list(reversed(self._corpus(make_file))))
        for text in ("types.h", "render/types.h"):
            assert forward.resolve(_inc(text), "engine/net/socket.cpp") == backward.resolve(
                _inc(text), "engine/net/socket.cpp"
            )


class TestPlaceholders:
    def test_missing_header_gets_placeholder(self, make_file):
        resolver = IncludeResolver([make_file("a.cpp")])
        target = resolver.resolve(_inc("missing.h"), "a.cpp")
        assert isinstance(target, ExternalPlaceholder)
        assert target.key == "missing.h"
        assert target.code_lines == 1
        assert str(target) == "<missing.h>"

    def test_same_missing_path_shares_placeholder(self, make_file):
        resolver = IncludeResolver([make_file("a.cpp"), make_file("b.cpp")])
        first = resolver.resolve(_inc("vector", system=True), "a.cpp")
        second = resolver.resolve(_inc("vector", system=True), "b.cpp")
        assert first is second
        assert list(resolver.placeholders) == ["vector"]

    def test_distinct_missing_paths_distinct_placeholders(self, make_file):
        resolver = IncludeResolver([make_file("a.cpp")])
        assert resolver.resolve(_inc("x.h"), "a.cpp") != resolver.resolve(_inc("y.h"), "a.cpp")

    def test_placeholder_lines_configurable(self, make_file):
        resolver = IncludeResolver([make_file("a.cpp")], placeholder_lines=40)
        assert resolver.resolve(_inc("stdio.h", system=True), "a.cpp").code_lines == 40


class TestCaseFolding:
    def test_case_sensitive_by_default(self, make_file):
        resolver = IncludeResolver([make_file("Util.h"), make_file("a.cpp")])
        assert isinstance(resolver.resolve(_inc("util.h"), "a.cpp"), ExternalPlaceholder)

    def test_case_insensitive(self, make_file):
        resolver = IncludeResolver([make_file("Util.h"), make_file("a.cpp")], case_sensitive=False)
        assert resolver.resolve(_inc("UTIL.H"), "a.cpp") == "Util.h"

    def test_case_insensitive_placeholders_merge(self, make_file):
        resolver = IncludeResolver([make_file("a.cpp")], case_sensitive=False)
        assert resolver.resolve(_inc("Windows.h"), "a.cpp") is resolver.resolve(
            _inc("windows.h"), "a.cpp"
        )
