"""Shared CUE sheet samples."""

from pathlib import Path

import pytest

EXAMPLE_CUE = (
    'PERFORMER "Artist"\r\n'
    'TITLE "Album"\r\n'
    'FILE "audio.bin" BINARY\r\n'
    "  TRACK 01 AUDIO\r\n"
    "    INDEX 01 00:00:00\r\n"
    "  TRACK 02 AUDIO\r\n"
    "    PREGAP 00:02:00\r\n"
    "    INDEX 01 03:15:42\r\n"
)

# Already in the layout the writer produces
FULL_CUE = (
    "CATALOG 0724384260927\r\n"
    'PERFORMER "The Band"\r\n'
    'TITLE "Live Album"\r\n'
    'SONGWRITER "Someone"\r\n'
    'CDTEXTFILE "album.cdt"\r\n'
    'FILE "album.wav" WAVE\r\n'
    "  TRACK 01 AUDIO\r\n"
    "    FLAGS DCP PRE\r\n"
    '    PERFORMER "Singer"\r\n'
    '    TITLE "Opening"\r\n'
    '    SONGWRITER "Writer"\r\n'
    "    ISRC USABC9912345\r\n"
    "    INDEX 01 00:00:00\r\n"
    "  TRACK 02 AUDIO\r\n"
    '    TITLE "Second"\r\n'
    "    PREGAP 00:02:00\r\n"
    "    INDEX 01 04:10:33\r\n"
    "    POSTGAP 00:01:00\r\n"
    "  TRACK 03 MODE1/2352\r\n"
    "    INDEX 01 08:00:00\r\n"
)

COMMENTED_CUE = (
    "REM GENRE Rock\r\n"
    "REM DATE 1999\r\n"
    "\r\n"
    f"{EXAMPLE_CUE}"
    "\r\n"
    "   rem trailing comment\r\n"
)


@pytest.fixture
def example_cue(tmp_path: Path) -> Path:
    """Write the commented example sheet to disk.

    Returns:
        Path to the CUE file.
    """
    cue_path = tmp_path / "example.cue"
    _ = cue_path.write_bytes(COMMENTED_CUE.encode("utf-8"))
    return cue_path


@pytest.fixture
def full_cue(tmp_path: Path) -> Path:
    cue_path = tmp_path / "full.cue"
    _ = cue_path.write_bytes(FULL_CUE.encode("utf-8"))
    return cue_path
