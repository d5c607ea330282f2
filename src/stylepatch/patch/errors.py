"""Patch error types."""


class PatchError(Exception):
    """Raised when an edit cannot be applied to the given text."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        span: tuple[int, int] | None = None,
    ):
        self.line = line
        self.span = span
        super().__init__(message)


class StaleModelError(PatchError):
    """The token or property offsets do not belong to the text passed in."""


class PatchConflictError(PatchError):
    """The text at a recorded change range no longer holds the expected value."""
