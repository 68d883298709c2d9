from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from os import PathLike

from cueplus.consts import DEFAULT_ENCODING

from .models import TRACK_ATTRIBUTES, Cuesheet, FileType, Track, TrackType
from .strip import strip_cue_file

logger = logging.getLogger("cueplus")

TIMECODE = r"\d{1,3}:\d{2}:\d{2}"
TRACK_TYPES = "|".join(re.escape(track_type.value) for track_type in TrackType)
FILE_TYPES = "|".join(file_type.value for file_type in FileType)


def quoted_command(keyword: str, name: str) -> re.Pattern[str]:
    # Quotes are optional. A value ends at a quote, or at trailing blanks
    # before the end of the line when unquoted.
    return re.compile(
        rf'\b{keyword}[ \t]+"?(?P<{name}>[^"\r\n]*?)(?:"|[ \t]*(?=[\r\n]|$))'
    )


FILE_COMMAND = re.compile(
    rf'\bFILE[ \t]+"?(?P<file>[^"\r\n]*)"?[ \t]+(?P<filetype>{FILE_TYPES})'
)
TRACK_COMMAND = re.compile(r"TRACK\s+\d{2}")
TRACK_BLOCK = re.compile(
    rf"TRACK\s+(?P<track>\d{{2}})\s+(?P<datatype>{TRACK_TYPES})"
    r"(?P<stuff>.+?)"
    rf"INDEX\s+\d{{2}}\s+(?P<index>{TIMECODE})(?=\s|$)"
    rf"(?:\s+POSTGAP\s+(?P<postgap>{TIMECODE}))?",
    re.DOTALL,
)

GLOBAL_COMMANDS: dict[str, re.Pattern[str]] = {
    "catalog": re.compile(r"\bCATALOG[ \t]+(?P<catalog>\d{13})"),
    "cdtextfile": quoted_command("CDTEXTFILE", "cdtextfile"),
    "performer": quoted_command("PERFORMER", "performer"),
    "title": quoted_command("TITLE", "title"),
    "songwriter": quoted_command("SONGWRITER", "songwriter"),
    "file": FILE_COMMAND,
    "filetype": FILE_COMMAND,
}

# track, datatype, index and postgap come from TRACK_BLOCK itself
TRACK_COMMANDS: dict[str, re.Pattern[str]] = {
    "file": FILE_COMMAND,
    "filetype": FILE_COMMAND,
    "flags": re.compile(
        r"\bFLAGS[ \t]+(?P<flags>\S[^\r\n]*?)[ \t]*(?:\r\n|\n|\r|$)"
    ),
    "performer": GLOBAL_COMMANDS["performer"],
    "title": GLOBAL_COMMANDS["title"],
    "songwriter": GLOBAL_COMMANDS["songwriter"],
    "pregap": re.compile(rf"\bPREGAP[ \t]+(?P<pregap>{TIMECODE})"),
    "isrc": re.compile(r"\bISRC[ \t]+(?P<isrc>[a-zA-Z]{5}\d{7})"),
}


def convert(name: str, value: str) -> str | FileType:
    if name == "filetype":
        return FileType(value)
    return value


class CueParser:
    """Build a :class:`Cuesheet` out of stripped CUE text.

    Global commands are taken from their first occurrence in the text,
    unless a ``TRACK nn`` command appears anywhere before that occurrence.
    The check is textual, so ``TRACK 05`` inside an earlier quoted title
    also hides a later global command.

    Track blocks run from ``TRACK`` to the first following ``INDEX`` line
    (plus an optional ``POSTGAP``). Anything between the two is searched
    for the remaining track attributes.
    """

    def __init__(self, debug: bool = False) -> None:
        self.debug: bool = debug

    def _trace(self, message: str) -> None:
        if self.debug:
            logger.debug(message)

    def parse(self, content: str) -> Cuesheet:
        cuesheet = Cuesheet()
        self.parse_globals(content, cuesheet)
        cuesheet.tracks = list(self.parse_tracks(content))
        logger.info(f"Parsed {len(cuesheet.tracks)} tracks")
        return cuesheet

    def parse_globals(self, content: str, cuesheet: Cuesheet) -> None:
        for name, pattern in GLOBAL_COMMANDS.items():
            match = pattern.search(content)
            if match is None:
                continue
            self._trace(f"Looking for CUE global: {name} = {match.group(name)!r}")
            if TRACK_COMMAND.search(content, 0, match.start()):
                self._trace(f"{name} belongs to a track, not setting it globally")
                continue
            setattr(cuesheet, name, convert(name, match.group(name)))

    def parse_tracks(self, content: str) -> Iterator[Track]:
        for i, match in enumerate(TRACK_BLOCK.finditer(content)):
            self._trace(f"MATCH #{i}: {match.group()!r}")
            track = Track(
                track=match.group("track"),
                datatype=TrackType(match.group("datatype")),
                index=match.group("index"),
                postgap=match.group("postgap"),
            )
            self.parse_track_attributes(match.group("stuff"), track)
            yield track

    def parse_track_attributes(self, stuff: str, track: Track) -> None:
        for name in TRACK_ATTRIBUTES:
            pattern = TRACK_COMMANDS.get(name)
            if pattern is None:
                continue
            match = pattern.search(stuff)
            if match is not None:
                self._trace(f"track {track.track}: {name} = {match.group(name)!r}")
                setattr(track, name, convert(name, match.group(name)))


def parse_cue_str(content: str, debug: bool = False) -> Cuesheet:
    return CueParser(debug).parse(content)


def parse_cuefile(
    file_name: str | PathLike[str],
    encoding: str = DEFAULT_ENCODING,
    debug: bool = False,
) -> Cuesheet:
    return CueParser(debug).parse(strip_cue_file(file_name, encoding))
