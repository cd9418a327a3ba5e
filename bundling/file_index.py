"""
Dual-keyed lookup over the submitted files.

An include can be written as "sub/foo.h" or just "foo.h" while the caller's
file names may or may not mirror a real directory tree, so lookups try the
exact name first and then fall back to the basename.
"""


def basename(path):
    """Return the part of path after the last '/' or '\\'."""
    path = str(path or '')
    cut = max(path.rfind('/'), path.rfind('\\'))
    return path[cut + 1:] if cut >= 0 else path


class FileIndex:
    """Lookup tables built once per bundle call."""

    def __init__(self, by_exact_name=None, by_basename=None):
        self.by_exact_name = by_exact_name or {}
        self.by_basename = by_basename or {}

    @classmethod
    def build(cls, files):
        # Later files win on collisions, for both keys
        by_exact_name = {f.name: f for f in files}
        by_basename = {basename(f.name): f for f in files}
        return cls(by_exact_name, by_basename)

    def lookup(self, include_name):
        """Resolve an include name to a SourceFile, or None if nothing matches."""
        found = self.by_exact_name.get(include_name)
        if found is not None:
            return found
        return self.by_basename.get(basename(include_name))

    def __len__(self):
        return len(self.by_exact_name)
