"""
Bundle assembler: turn a multi-file C/C++ project into one translation unit.

Headers are never emitted on their own; they get inlined where the sources
include them, which keeps each header's text in the output exactly once.
"""
from .entry import select_entry
from .expander import MAX_INCLUDE_DEPTH, ExpansionContext, expand, line_directive
from .file_index import FileIndex
from .languages import bundled_file_name
from .log import debug_log
from .models import SourceFile, coerce_files


def _concat_verbatim(lang, files):
    """Fallback for submissions without any source file (e.g. headers only)."""
    content = "\n".join(f"// --- {f.name} ---\n{f.content}\n" for f in files)
    return [SourceFile(name=bundled_file_name(lang), content=content)]


def _chunk(name, body):
    if not body.endswith('\n'):
        body += '\n'
    return f"{line_directive(1, name)}\n{body}"


def assemble(lang, files, max_depth=MAX_INCLUDE_DEPTH):
    """
    Bundle files into a single source file for lang.

    Order of the output: secondary sources in input order, then the entry
    file, each expanded with one shared ExpansionContext so a header included
    from several sources is inlined only at its first occurrence.

    Args:
        lang: Normalized language tag ('c' or 'cpp')
        files: Sequence of SourceFile (or name/content mappings)
        max_depth: Include nesting ceiling

    Returns:
        A one-element list with the synthetic main.cpp / main.c

    Raises:
        BundleInputError: If files is not a sequence of name/content records
    """
    files = coerce_files(files)
    index = FileIndex.build(files)

    entry, secondary = select_entry(lang, files)
    if entry is None:
        debug_log("No source files found, concatenating inputs verbatim")
        return _concat_verbatim(lang, files)
    debug_log(f"Entry file: {entry.name}; secondary sources: {[f.name for f in secondary]}")

    ctx = ExpansionContext(max_depth=max_depth)
    chunks = []
    for source in secondary + [entry]:
        expanded = expand(source.name, source.content, index, ctx)
        chunks.append(_chunk(source.name, expanded))

    debug_log(f"Inlined {len(ctx.seen)} header(s) into {len(chunks)} chunk(s)")
    return [SourceFile(name=bundled_file_name(lang), content="\n\n".join(chunks))]
