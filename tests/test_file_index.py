"""
Unit tests for the file index.
"""
import pytest

from bundling.file_index import FileIndex, basename
from bundling.models import SourceFile


class TestBasename:
    """Tests for basename()."""

    def test_forward_slash(self):
        assert basename("src/util/foo.h") == "foo.h"

    def test_backslash(self):
        assert basename("src\\util\\foo.h") == "foo.h"

    def test_mixed_separators_use_last(self):
        assert basename("a\\b/c.h") == "c.h"

    def test_bare_name(self):
        assert basename("foo.h") == "foo.h"

    def test_none_is_empty(self):
        assert basename(None) == ""


class TestFileIndex:
    """Tests for FileIndex.build() and lookup()."""

    @pytest.fixture
    def files(self):
        return [
            SourceFile(name="include/util.h", content="int util();"),
            SourceFile(name="main.cpp", content="int main() {}"),
        ]

    def test_empty_index(self):
        """An empty file list gives an index that resolves nothing."""
        index = FileIndex.build([])
        assert len(index) == 0
        assert index.lookup("foo.h") is None

    def test_exact_match(self, files):
        index = FileIndex.build(files)
        assert index.lookup("include/util.h") is files[0]

    def test_basename_fallback(self, files):
        """'#include "util.h"' finds 'include/util.h'."""
        index = FileIndex.build(files)
        assert index.lookup("util.h") is files[0]

    def test_include_path_with_other_directory_falls_back_to_basename(self, files):
        index = FileIndex.build(files)
        assert index.lookup("../other/util.h") is files[0]

    def test_not_found(self, files):
        index = FileIndex.build(files)
        assert index.lookup("missing.h") is None

    def test_exact_match_wins_over_basename(self):
        """A file whose full name matches is preferred to a basename collision."""
        exact = SourceFile(name="foo.h", content="exact")
        nested = SourceFile(name="sub/foo.h", content="nested")
        index = FileIndex.build([exact, nested])
        assert index.lookup("foo.h") is exact
        assert index.lookup("sub/foo.h") is nested

    def test_basename_collision_last_writer_wins(self):
        first = SourceFile(name="a/foo.h", content="first")
        second = SourceFile(name="b/foo.h", content="second")
        index = FileIndex.build([first, second])
        assert index.lookup("foo.h") is second
