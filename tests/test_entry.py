"""
Unit tests for entry-point selection.
"""
from bundling.entry import has_main, select_entry, strip_comments
from bundling.models import SourceFile


def src(name, content=""):
    return SourceFile(name=name, content=content)


class TestHasMain:
    """Tests for has_main()."""

    def test_plain_main(self):
        assert has_main("int main() { return 0; }")

    def test_main_with_arguments_and_spacing(self):
        assert has_main("int\nmain (int argc, char **argv)\n{\n}")

    def test_main_in_block_comment_is_ignored(self):
        assert not has_main("/* int main() { } */\nvoid f() {}")

    def test_main_in_line_comment_is_ignored(self):
        assert not has_main("// int main()\nvoid f() {}")

    def test_void_main_is_not_detected(self):
        assert not has_main("void main() {}")

    def test_similar_names_are_not_detected(self):
        assert not has_main("int domain(int x); int main_loop();")

    def test_strip_comments_is_textual(self):
        """String literals are not understood: '//' inside them starts a comment."""
        assert strip_comments('const char *u = "http://x";') == 'const char *u = "http:'


class TestSelectEntry:
    """Tests for select_entry()."""

    def test_main_by_name(self):
        util = src("util.cpp", "int main() {}")
        main = src("main.cpp", "void run();")
        entry, secondary = select_entry("cpp", [util, main])
        assert entry is main
        assert secondary == [util]

    def test_main_by_name_is_case_insensitive_and_ignores_directories(self):
        main = src("src/MAIN.CC")
        other = src("other.cc")
        entry, _ = select_entry("cpp", [other, main])
        assert entry is main

    def test_main_by_body(self):
        a = src("a.cpp", "void a() {}")
        b = src("b.cpp", "int main(void) { a(); }")
        c = src("c.cpp", "int main() {}")
        entry, secondary = select_entry("cpp", [a, b, c])
        assert entry is b
        assert secondary == [a, c]

    def test_fallback_to_first_source(self):
        a = src("a.c", "void a(void) {}")
        b = src("b.c", "void b(void) {}")
        entry, secondary = select_entry("c", [a, b])
        assert entry is a
        assert secondary == [b]

    def test_headers_are_skipped(self):
        header = src("main.h", "int main();")
        source = src("app.cpp", "int main() {}")
        entry, secondary = select_entry("cpp", [header, source])
        assert entry is source
        assert secondary == []

    def test_language_filters_sources(self):
        """A .c file is not a C++ source and vice versa."""
        entry, _ = select_entry("cpp", [src("main.c", "int main() {}")])
        assert entry is None

    def test_no_sources(self):
        assert select_entry("cpp", [src("a.h"), src("b.hpp")]) == (None, [])
