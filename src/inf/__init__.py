import os

from .document import Document
from .entry import Entry
from .errors import (
    FileDoesNotExistError,
    FileOpenError,
    FileReadError,
    GrammarError,
    InfError,
    InvalidContinuation,
    InvalidLineTerminator,
    InvalidQuotedValue,
    InvalidSectionName,
    ReadLineError,
    SectionParseError,
    Stage,
)
from .reader import DEFAULT_BUFFER_SIZE, Reader, read, read_file
from .section import Section
from .value import Value, ValueKind

__all__ = (
    "Document",
    "Entry",
    "FileDoesNotExistError",
    "FileOpenError",
    "FileReadError",
    "GrammarError",
    "InfError",
    "InvalidContinuation",
    "InvalidLineTerminator",
    "InvalidQuotedValue",
    "InvalidSectionName",
    "ReadLineError",
    "Section",
    "SectionParseError",
    "Stage",
    "Value",
    "ValueKind",
    "load",
    "loads",
    "read",
)


def load(
    path: str | os.PathLike[str], *, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> Document:
    """Parse the INF file at `path`.

    INF is a text-based Setup Information format for Windows-based software
    and drivers.

    <https://learn.microsoft.com/en-us/windows-hardware/drivers/install/general-syntax-rules-for-inf-files>

    Parameters
    ----------
    path
        Location of the file to parse.
    buffer_size
        Number of bytes read from the file at a time.

    Returns
    -------
    Document
        Mapping of section names to sections. Values are kept exactly as
        written; `%strkey%` tokens are not substituted.

    Raises
    ------
    InfError
        If the file cannot be located, opened or read, or its content is
        not valid INF. `InfError.stage` tells which step failed.
    """
    return read_file(path, buffer_size=buffer_size)


def loads(data: str | bytes) -> Document:
    """Parse an INF document held in memory.

    `bytes` go through the same encoding detection as files; `str` is used
    as is.
    """
    reader = Reader()

    if isinstance(data, str):
        reader.feed_text(data)
    else:
        reader.feed(data, final=True)

    return reader.close()


del os
