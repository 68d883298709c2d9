import dataclasses
from collections.abc import Iterator
from enum import Enum

__all__ = ["TrackType", "FileType", "Track", "Cuesheet", "TRACK_ATTRIBUTES"]

# Order used when listing and scanning track attributes
TRACK_ATTRIBUTES: tuple[str, ...] = (
    "track",
    "datatype",
    "file",
    "filetype",
    "flags",
    "performer",
    "title",
    "songwriter",
    "pregap",
    "isrc",
    "index",
    "postgap",
)


class TrackType(Enum):
    AUDIO = "AUDIO"
    CDG = "CDG"
    MODE12048 = "MODE1/2048"
    MODE12352 = "MODE1/2352"
    MODE22336 = "MODE2/2336"
    MODE22352 = "MODE2/2352"
    CDI2336 = "CDI/2336"
    CDI2352 = "CDI/2352"


class FileType(Enum):
    BINARY = "BINARY"
    MOTOROLA = "MOTOROLA"
    AIFF = "AIFF"
    WAVE = "WAVE"
    MP3 = "MP3"


@dataclasses.dataclass()
class Track:
    track: str
    datatype: TrackType
    index: str
    file: str | None = None
    filetype: FileType | None = None
    flags: str | None = None
    performer: str | None = None
    title: str | None = None
    songwriter: str | None = None
    pregap: str | None = None
    isrc: str | None = None
    postgap: str | None = None

    def attributes(self) -> Iterator[tuple[str, str]]:
        """Set attributes in canonical order, enums as their CUE token."""
        for name in TRACK_ATTRIBUTES:
            value = getattr(self, name)
            if value is None:
                continue
            yield name, value.value if isinstance(value, Enum) else value


@dataclasses.dataclass()
class Cuesheet:
    catalog: str | None = None
    performer: str | None = None
    title: str | None = None
    songwriter: str | None = None
    cdtextfile: str | None = None
    file: str | None = None
    filetype: FileType | None = None
    # None until a parse has populated it
    tracks: list[Track] | None = None
