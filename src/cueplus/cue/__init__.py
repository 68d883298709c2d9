from .errors import (
    CueError,
    EmptyTracksError,
    PathNotFoundError,
    ReadError,
    WriteError,
)
from .models import TRACK_ATTRIBUTES, Cuesheet, FileType, Track, TrackType
from .parse import CueParser, parse_cue_str, parse_cuefile
from .strip import strip_cue_file, strip_cue_text
from .write import CueWriter, list_tracks, write_cue_str

__all__ = [
    "Cuesheet",
    "CueError",
    "CueParser",
    "CueWriter",
    "EmptyTracksError",
    "FileType",
    "PathNotFoundError",
    "ReadError",
    "TRACK_ATTRIBUTES",
    "Track",
    "TrackType",
    "WriteError",
    "list_tracks",
    "parse_cue_str",
    "parse_cuefile",
    "strip_cue_file",
    "strip_cue_text",
    "write_cue_str",
]
