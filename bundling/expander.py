"""
Include expander for C/C++ sources.

Recursively replaces '#include "header.h"' lines with the header's text,
similar to what the preprocessor does, but only for quoted includes that
resolve inside the submitted file set. Everything else (angle-bracket
includes, macros, conditionals) passes through untouched.
"""
import re

from .log import debug_log

MAX_INCLUDE_DEPTH = 32

# optional indent, '#', 'include', a quoted name, anything up to end of line
INCLUDE_RE = re.compile(r'^[ \t]*#[ \t]*include[ \t]*"([^"]+)".*$')
PRAGMA_ONCE_RE = re.compile(r'^[ \t]*#[ \t]*pragma[ \t]+once\b.*$', re.MULTILINE | re.IGNORECASE)


class ExpansionContext:
    """
    State threaded through one expansion branch.

    'stack' is the chain of headers currently being expanded and is copied on
    every descent. 'seen' holds every header already inlined in this bundle
    and is the same set object for all branches and all top-level sources.
    """

    def __init__(self, depth=0, stack=(), seen=None, max_depth=MAX_INCLUDE_DEPTH):
        self.depth = depth
        self.stack = tuple(stack)
        self.seen = set() if seen is None else seen
        self.max_depth = max_depth

    def descend(self, key):
        """Context for expanding the header 'key' one level deeper."""
        return ExpansionContext(
            depth=self.depth + 1,
            stack=self.stack + (key,),
            seen=self.seen,
            max_depth=self.max_depth,
        )


def line_directive(line_number, file_name):
    """Build a '#line' directive; the file name is escaped as a C string literal."""
    escaped = str(file_name).replace('\\', '\\\\').replace('"', '\\"')
    return f'#line {line_number} "{escaped}"'


def strip_pragma_once(code):
    """Blank out '#pragma once' lines, keeping the line count intact."""
    return PRAGMA_ONCE_RE.sub('', code)


def expand(origin_name, code, index, ctx):
    """
    Inline every resolvable quoted include of 'code'.

    Args:
        origin_name: Name of the file 'code' came from, used in #line directives
        code: Text to expand; never modified
        index: FileIndex used to resolve include names
        ctx: ExpansionContext; ctx.seen is updated with every header inlined

    Returns:
        The expanded text. Anomalies (cycles, duplicates, depth overflow)
        are reported as comments in the output, never raised.
    """
    if ctx.depth > ctx.max_depth:
        debug_log(f"Include depth limit ({ctx.max_depth}) exceeded at {origin_name}")
        return f"/* include depth limit exceeded at {origin_name} */\n" + code

    out = []
    # Split on "\n" only, the way the compiler counts lines
    for line_number, line in enumerate(code.split("\n"), 1):
        match = INCLUDE_RE.match(line)
        if not match:
            out.append(line)
            continue

        include_name = match.group(1)
        target = index.lookup(include_name)
        if target is None:
            # Let the real compiler report the missing file
            debug_log(f"{origin_name}:{line_number}: \"{include_name}\" not in file set, kept as is")
            out.append(line)
            continue

        key = target.name
        if key in ctx.stack:
            debug_log(f"{origin_name}:{line_number}: circular include of {key} skipped")
            out.append(f'/* skipped recursive include "{key}" */')
        elif key in ctx.seen:
            debug_log(f"{origin_name}:{line_number}: {key} already inlined, skipped")
            out.append(f'/* skipped duplicate include "{key}" */')
        else:
            ctx.seen.add(key)
            body = strip_pragma_once(target.content)
            nested = expand(key, body, index, ctx.descend(key))
            if not nested.endswith('\n'):
                nested += '\n'
            out.append(
                f"// === begin include {key} ===\n"
                f"{line_directive(1, key)}\n"
                f"{nested}"
                f"// === end include {key} ===\n"
                f"{line_directive(line_number + 1, origin_name)}"
            )

    return "\n".join(out)
