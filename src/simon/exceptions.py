"""Error types raised by the Simon command processor and its collaborators."""


class SimonError(Exception):
    """Base class for recoverable errors; the message is shown to the user."""


class EmptyNameError(SimonError):
    """A task was added without a name."""


class MissingFieldError(SimonError):
    """A required /by, /from or /to field is missing or blank."""


class InvalidIndexError(SimonError):
    """A task number is not a positive integer or is out of range."""


class StorageError(SimonError):
    """The task file could not be read or written."""
