# zwranker/errors.py — Fatal error kinds of a report run


class ZwRankerError(Exception):
    """Base class for every fatal error raised by a report run."""


class ConfigurationError(ZwRankerError, ValueError):
    """Run configuration is inconsistent or a header cannot be read."""


class SourceReadError(ZwRankerError, RuntimeError):
    """A breed's input file cannot be opened or parsed."""

    def __init__(self, breed: str, path: str, cause: Exception):
        self.breed = breed
        self.path  = path
        self.cause = cause
        super().__init__(f"Cannot read breed '{breed}' from {path}: {cause}")


class DestinationWriteError(ZwRankerError, RuntimeError):
    """The report workbook cannot be written."""

    def __init__(self, path: str, cause: Exception):
        self.path  = path
        self.cause = cause
        super().__init__(f"Cannot write report {path}: {cause}")
