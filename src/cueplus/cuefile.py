from __future__ import annotations

import logging
import pathlib
from os import PathLike

from cueplus.consts import DEFAULT_ENCODING
from cueplus.cue import (
    Cuesheet,
    CueParser,
    CueWriter,
    PathNotFoundError,
    WriteError,
    list_tracks,
    strip_cue_file,
)

logger = logging.getLogger("cueplus")


class CueFile:
    """A CUE sheet on disk and its parsed contents.

    The stored ``path`` is used whenever :meth:`load` or :meth:`write` is
    called without one. Creating a ``CueFile`` for an existing path loads it
    straight away.
    """

    def __init__(
        self,
        path: str | PathLike[str] | None = None,
        *,
        encoding: str = DEFAULT_ENCODING,
        debug: bool = False,
    ) -> None:
        self.path: pathlib.Path | None = pathlib.Path(path) if path else None
        self.encoding: str = encoding
        self.debug: bool = debug
        self.sheet: Cuesheet = Cuesheet()
        if self.path is not None and self.path.exists():
            _ = self.load(self.path)

    def _resolve(self, path: str | PathLike[str] | None) -> pathlib.Path:
        if path:
            return pathlib.Path(path)
        if self.path is None:
            raise PathNotFoundError("No CUE file path given and none stored")
        return self.path

    def load(self, path: str | PathLike[str] | None = None) -> Cuesheet:
        cue_path = self._resolve(path)
        content = strip_cue_file(cue_path, self.encoding)
        self.sheet = CueParser(self.debug).parse(content)
        if self.path is None:
            self.path = cue_path
        return self.sheet

    def dumps(self) -> str:
        return CueWriter(self.debug).dumps(self.sheet)

    def write(self, path: str | PathLike[str] | None = None) -> pathlib.Path:
        cue_path = self._resolve(path)
        content = self.dumps()
        logger.info(f"Writing {cue_path}")
        try:
            # newline="" stops CRLF becoming CRCRLF on Windows
            with cue_path.open(
                "w", encoding=self.encoding, errors="surrogateescape", newline=""
            ) as cue_file:
                _ = cue_file.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise WriteError(f"Could not write {cue_path}: {e}") from e
        self.path = cue_path
        return cue_path

    def list_tracks(self) -> str:
        return list_tracks(self.sheet)
