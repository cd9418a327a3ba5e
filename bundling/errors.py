"""
Error types for tu-bundle.

Bundling itself degrades instead of failing; these exceptions cover the few
places where a hard failure is the right answer (malformed input, bad
configuration, remote execution problems).
"""


class TuBundleError(Exception):
    """Base exception with a readable message, an optional file and a hint."""
    title = "Bundle Error"

    def __init__(self, message, file_name=None, suggestion=None):
        self.message = message
        self.file_name = file_name
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with file context and suggestion."""
        lines = [f"{self.title}"]
        if self.file_name:
            lines.append(f" in {self.file_name}")
        lines.append(":\n")
        lines.append(f"   {self.message}\n")
        if self.suggestion:
            lines.append(f"   hint: {self.suggestion}\n")
        return "".join(lines)


class BundleInputError(TuBundleError):
    """Raised when the caller did not pass a sequence of name/content records."""
    title = "Invalid Input"


class BundleConfigError(TuBundleError):
    """Raised when a runner configuration file holds invalid values."""
    title = "Invalid Configuration"


class RemoteRunError(TuBundleError):
    """Raised when the remote compile-and-run service cannot be used."""
    title = "Remote Run Failed"

    def __init__(self, message, status=None, suggestion=None):
        self.status = status
        super().__init__(message, suggestion=suggestion)
