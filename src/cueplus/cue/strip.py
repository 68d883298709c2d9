import logging
import pathlib
import re
from os import PathLike

from cueplus.consts import DEFAULT_ENCODING

from .errors import ReadError

logger = logging.getLogger("cueplus")

LINE = re.compile(r"[^\n]*\n|[^\n]+")
COMMENT = re.compile(r"\s*REM", re.IGNORECASE)
BLANK_LINES = frozenset(("\n", "\r\n", "\r"))


def is_comment(line: str) -> bool:
    return COMMENT.match(line) is not None


def is_blank(line: str) -> bool:
    # Whitespace-only lines are content, only bare terminators count
    return line in BLANK_LINES


def strip_cue_text(text: str) -> str:
    kept: list[str] = []
    for match in LINE.finditer(text):
        line = match.group()
        if is_comment(line) or is_blank(line):
            continue
        kept.append(line)
    return "".join(kept)


def strip_cue_file(
    file_name: str | PathLike[str], encoding: str = DEFAULT_ENCODING
) -> str:
    path = pathlib.Path(file_name)
    logger.info(f"Reading {path}")
    try:
        # newline="" keeps CRLF terminators intact, surrogateescape keeps
        # undecodable bytes so they are written back unchanged
        with path.open(
            "r", encoding=encoding, errors="surrogateescape", newline=""
        ) as cue_file:
            content = cue_file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Could not open {path}: {e}") from e
    return strip_cue_text(content)
