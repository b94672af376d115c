"""Tests for the include-cost exception hierarchy."""

from pathlib import Path

import pytest

from include_cost.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    IncludeCostError,
    IncludeCycleError,
    InvalidConfigError,
    InvalidPathError,
)


class TestBaseError:
    def test_message_without_details(self):
        err = IncludeCostError("boom")
        assert str(err) == "boom"
        assert err.details == {}

    def test_details_are_appended(self):
        err = IncludeCostError("boom", details={"file": "a.h"})
        assert str(err) == "boom (file=a.h)"

    def test_detail_values_become_strings(self):
        err = IncludeCostError("bad workers", details={"workers": 0})
        assert err.details == {"workers": "0"}
        assert str(err) == "bad workers (workers=0)"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err, parent",
        [
            (FileAccessError(Path("a.h"), "denied"), AnalysisError),
            (IncludeCycleError(["a.h", "b.h", "a.h"]), AnalysisError),
            (InvalidPathError(Path("src"), "missing"), ConfigurationError),
            (InvalidConfigError("workers", 0, "must be >= 1"), ConfigurationError),
        ],
    )
    def test_subclasses(self, err, parent):
        assert isinstance(err, parent)
        assert isinstance(err, IncludeCostError)


class TestIncludeCycleError:
    def test_message_lists_cycle(self):
        err = IncludeCycleError(["a.h", "b.h", "a.h"])
        assert "a.h -> b.h -> a.h" in str(err)
        assert err.details["length"] == "2"

    def test_files_drop_repeated_head(self):
        err = IncludeCycleError(["a.h", "b.h", "a.h"])
        assert err.files == ["a.h", "b.h"]

    def test_self_include(self):
        err = IncludeCycleError(["a.h", "a.h"])
        assert err.files == ["a.h"]
        assert err.details["length"] == "1"


class TestFileAccessError:
    def test_carries_path_and_reason(self):
        err = FileAccessError(Path("inc/a.h"), "Permission denied")
        assert err.filepath == Path("inc/a.h")
        assert err.details["reason"] == "Permission denied"
        assert "inc/a.h" in str(err)
