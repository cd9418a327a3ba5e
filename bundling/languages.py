"""
Language tags and file classification for C and C++ submissions.
"""
import re

CPP_ALIASES = ('c++', 'cpp', 'cxx', 'cc')
BUNDLED_LANGUAGES = ('c', 'cpp')

HEADER_RE = re.compile(r'\.(h|hh|hpp|hxx)$', re.IGNORECASE)
CPP_SOURCE_RE = re.compile(r'\.(cpp|cc|cxx)$', re.IGNORECASE)
C_SOURCE_RE = re.compile(r'\.c$', re.IGNORECASE)


def normalize_language(value):
    """Map a client language tag to 'cpp', 'c', or its lower-cased self."""
    tag = str(value or '').strip().lower()
    if tag in CPP_ALIASES:
        return 'cpp'
    return tag


def is_header(name):
    return bool(HEADER_RE.search(name))


def is_source(lang, name):
    """True if name is a translation-unit source for lang (headers never are)."""
    pattern = CPP_SOURCE_RE if lang == 'cpp' else C_SOURCE_RE
    return bool(pattern.search(name))


def bundled_file_name(lang):
    return 'main.cpp' if lang == 'cpp' else 'main.c'


def infer_language(names):
    """
    Guess the language of a file set from its extensions.

    Any C++ source makes it C++; otherwise any .c source makes it C.
    A headers-only set is treated as C++. Returns None for anything else.
    """
    if any(CPP_SOURCE_RE.search(n) for n in names):
        return 'cpp'
    if any(C_SOURCE_RE.search(n) for n in names):
        return 'c'
    if names and all(is_header(n) for n in names):
        return 'cpp'
    return None
