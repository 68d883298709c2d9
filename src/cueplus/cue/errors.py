"""Exception classes for CUE sheet handling."""


class CueError(Exception):
    """Base exception for all CUE-related errors."""


class PathNotFoundError(CueError):
    """Raised when no path was given and none is stored on the document."""


class ReadError(CueError):
    """Raised when a CUE file cannot be opened or read."""


class WriteError(CueError):
    """Raised when a CUE file cannot be opened or written."""


class EmptyTracksError(CueError):
    """Raised when tracks are listed before any CUE sheet was parsed."""
