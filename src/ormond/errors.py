"""Error types raised while registering and loading test files."""

from pathlib import Path


class OrmondError(Exception):
    """Base class for ormond errors."""


class RegistrationError(OrmondError):
    """Raised when a registration entry point is called outside its context."""


class LoadError(OrmondError):
    """Raised when a test file cannot be loaded."""

    def __init__(self, path: Path | str, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause

        if cause is None:
            message = f"Test file not found: {self.path}"
        else:
            message = f"Failed to load test file: {self.path}\nCause: {cause!r}"

        super().__init__(message)


__all__ = ["LoadError", "OrmondError", "RegistrationError"]
