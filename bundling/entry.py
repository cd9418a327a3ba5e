"""
Entry-point selection: decide which source file holds main().
"""
import re

from .file_index import basename
from .languages import is_source

MAIN_NAME_RE = re.compile(r'^main\.(cpp|cc|cxx|c)$', re.IGNORECASE)
MAIN_SIGNATURE_RE = re.compile(r'\bint\s+main\s*\(')

BLOCK_COMMENT_RE = re.compile(r'/\*.*?\*/', re.DOTALL)
LINE_COMMENT_RE = re.compile(r'//.*$', re.MULTILINE)


def strip_comments(code):
    """
    Remove block and line comments textually.

    String and character literals are not understood, so a literal such as
    "http://x" loses its tail. That is good enough for spotting main().
    """
    without_blocks = BLOCK_COMMENT_RE.sub('', str(code))
    return LINE_COMMENT_RE.sub('', without_blocks)


def has_main(code):
    """True if code defines an int-returning main with a parameter list."""
    return bool(MAIN_SIGNATURE_RE.search(strip_comments(code)))


def select_entry(lang, files):
    """
    Split the source files of lang into the entry file and secondary sources.

    Preference order: a file named main.<ext>, then the first file whose body
    defines int main(...), then the first source in input order.

    Args:
        lang: Normalized language tag ('c' or 'cpp')
        files: All submitted SourceFile objects, in input order

    Returns:
        (entry, secondary_sources); entry is None when there are no sources
    """
    sources = [f for f in files if is_source(lang, f.name)]
    if not sources:
        return None, []

    entry = next((f for f in sources if MAIN_NAME_RE.match(basename(f.name))), None)
    if entry is None:
        entry = next((f for f in sources if has_main(f.content)), None)
    if entry is None:
        entry = sources[0]

    # Identity, not equality: two files may share name and content
    secondary = [f for f in sources if f is not entry]
    return entry, secondary
