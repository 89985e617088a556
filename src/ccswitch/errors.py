"""
Custom exceptions for ccswitch.

All exceptions inherit from CcsError so the CLI and the web UI can catch them
in one place.
"""


class CcsError(Exception):
    """Base exception for all ccswitch errors."""
    pass


class FileAccessError(CcsError):
    """A catalog or settings file could not be read or written."""
    pass


class ParseError(CcsError):
    """A JSON file is malformed or has the wrong top-level type."""
    pass


class DuplicateNameError(CcsError):
    """A project with the same name is already registered."""
    pass


class DuplicatePathError(CcsError):
    """A project with the same path is already registered."""
    pass


class NotFoundError(CcsError):
    """The requested profile or project does not exist."""
    pass
