import enum
import os


class Stage(enum.IntEnum):
    """The part of the pipeline that produced an `InfError`."""

    LOCATE = enum.auto()
    OPEN = enum.auto()
    READ = enum.auto()
    LINES = enum.auto()
    SECTIONS = enum.auto()


class InfError(Exception):
    """Base class for every error raised while loading an INF file."""

    stage: Stage

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FileDoesNotExistError(InfError):
    stage = Stage.LOCATE

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(f"file does not exist: {os.fspath(path)}")
        self.path = path


class FileOpenError(InfError):
    stage = Stage.OPEN

    def __init__(self, path: str | os.PathLike[str], cause: OSError) -> None:
        super().__init__(f"failed to open {os.fspath(path)}: {cause}", cause)
        self.path = path


class FileReadError(InfError):
    stage = Stage.READ


class ReadLineError(InfError):
    stage = Stage.LINES


class SectionParseError(InfError):
    stage = Stage.SECTIONS


# Errors raised by the individual components. `Reader` wraps these in one of
# the stage errors above.


class InvalidLineTerminator(ValueError):
    def __init__(self, offset: int) -> None:
        super().__init__(
            f"invalid line terminator: found \\r not followed by \\n "
            f"(offset {offset} in buffered text)"
        )
        self.offset = offset


class GrammarError(ValueError):
    pass


class InvalidSectionName(GrammarError):
    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"invalid section name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class InvalidQuotedValue(GrammarError):
    def __init__(self, key: str, section: str) -> None:
        super().__init__(
            f"unterminated quoted value, key: {key!r}, section: {section!r}"
        )
        self.key = key
        self.section = section


class InvalidContinuation(GrammarError):
    def __init__(self, key: str, section: str, trailing: str) -> None:
        super().__init__(
            f"unexpected text {trailing!r} after quoted value, "
            f"key: {key!r}, section: {section!r}"
        )
        self.key = key
        self.section = section
        self.trailing = trailing
