import logging
import os
from pathlib import Path
from typing import BinaryIO

from .decoder import Decoder
from .document import Document
from .errors import (
    FileDoesNotExistError,
    FileOpenError,
    FileReadError,
    GrammarError,
    InvalidLineTerminator,
    ReadLineError,
    SectionParseError,
)
from .lines import LineAssembler
from .parser import SectionParser

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 1024


class Reader:
    """Push-based pipeline turning INF bytes (or text) into a `Document`.

    Each instance parses exactly one document.
    """

    def __init__(self) -> None:
        self.decoder = Decoder()
        self.lines = LineAssembler()
        self.parser = SectionParser()

    def feed(self, data: bytes, final: bool = False) -> None:
        self.feed_text(self.decoder.decode(data, final))

    def feed_text(self, text: str) -> None:
        try:
            self.lines.feed(text)
        except InvalidLineTerminator as e:
            raise ReadLineError(str(e), e) from e

        self._drain()

    def close(self) -> Document:
        try:
            self.lines.finalize()
        except InvalidLineTerminator as e:
            raise ReadLineError(str(e), e) from e

        self._drain()
        return self.parser.document()

    def _drain(self) -> None:
        for line in self.lines.take_lines():
            try:
                self.parser.feed(line)
            except GrammarError as e:
                raise SectionParseError(str(e), e) from e


def read(fp: BinaryIO, *, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Document:
    """Parse an INF document from a binary file object.

    A read returning fewer than `buffer_size` bytes is taken as the end of
    the stream. This holds for regular files but not for pipes or sockets,
    which may return short reads at any time.
    """
    if buffer_size < 1:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    reader = Reader()

    while True:
        try:
            chunk = fp.read(buffer_size)
        except OSError as e:
            raise FileReadError(f"failed to read: {e}", e) from e

        final = len(chunk) < buffer_size
        reader.feed(chunk, final)

        if final:
            break

    return reader.close()


def read_file(
    path: str | os.PathLike[str], *, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> Document:
    path = Path(path)

    # Not atomic with the open below; a file removed in between surfaces as
    # a `FileOpenError` instead.
    if not path.exists():
        raise FileDoesNotExistError(path)

    try:
        fp = path.open("rb")
    except OSError as e:
        raise FileOpenError(path, e) from e

    logger.debug("parsing %s", path)

    with fp:
        return read(fp, buffer_size=buffer_size)
