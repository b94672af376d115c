"""Shared test fixtures for include-cost."""

from pathlib import Path

import pytest

from include_cost.scanning.lexer import scan_source
from include_cost.scanning.models import SourceFile


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def make_source(path, text="", is_source=None):
    """Build a SourceFile from in-memory text, the way the reader would."""
    result = scan_source(text)
    if is_source is None:
        is_source = path.endswith((".c", ".cc", ".cpp", ".cxx"))
    return SourceFile(
        path=path,
        size_bytes=len(text.encode("utf-8")),
        text_lines=result.text_lines,
        code_lines=result.code_lines,
        includes=result.includes,
        is_source=is_source,
    )


@pytest.fixture
def write_tree(tmp_path):
    """Write {relative_path: text} under tmp_path and return the root."""

    def _write(files, root=None):
        base = Path(root) if root is not None else tmp_path
        for rel, text in files.items():
            target = base / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        return base

    return _write


@pytest.fixture
def diamond_corpus():
    """a.cpp includes b.h and c.h; both include d.h."""
    return [
        make_source("a.cpp", '#include "b.h"\n#include "c.h"\nint main() { return 0; }\n'),
        make_source("b.h", '#include "d.h"\nint b();\n'),
        make_source("c.h", '#include "d.h"\nint c();\n'),
        make_source("d.h", "int d();\nint d2();\nint d3();\n"),
    ]


@pytest.fixture
def make_file():
    """Factory fixture: make_file(path, text) -> SourceFile."""
    return make_source
