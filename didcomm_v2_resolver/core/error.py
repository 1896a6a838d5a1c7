"""Exception base class shared by the package."""

import re


class BaseError(Exception):
    """Base class of every error raised by this package."""

    def __init__(self, *args, error_code: str = None):
        """Initialize a BaseError with an optional machine readable code."""
        super().__init__(*args)
        self.error_code = error_code or None

    @property
    def message(self) -> str:
        """Accessor for the error message."""
        return str(self.args[0]).strip() if self.args else ""

    @property
    def roll_up(self) -> str:
        """Messages of this error and each chained cause, as a single line."""
        parts = []
        exc = self
        while exc is not None:
            text = str(exc.args[0]).strip() if exc.args else exc.__class__.__name__
            parts.append(re.sub(r"\.?\s*\n\s*", ". ", text).rstrip("."))
            exc = exc.__cause__
        return ". ".join(parts) + "."
