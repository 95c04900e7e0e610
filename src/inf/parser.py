import dataclasses
import logging

from .document import Document
from .entry import Entry
from .errors import InvalidContinuation, InvalidQuotedValue
from .section import Section, validate_name
from .value import Value

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class PendingQuoted:
    """A quoted value followed by `\\`, waiting for its next line."""

    key: str
    partial: str


@dataclasses.dataclass(frozen=True)
class PendingUnquoted:
    """An unquoted value ending in `\\`, waiting for its next line."""

    key: str
    partial: str


Continuation = PendingQuoted | PendingUnquoted | None


@dataclasses.dataclass(frozen=True)
class Idle:
    """No section header has been seen yet."""


@dataclasses.dataclass(frozen=True)
class InSection:
    name: str
    continuation: Continuation = None


State = Idle | InSection


class SectionParser:
    """Build a `Document` from logical lines, one line at a time."""

    def __init__(self) -> None:
        self._sections: dict[str, Section] = {}
        self.state: State = Idle()

    def feed(self, line: str) -> None:
        line = line.strip()

        if not line or line.startswith(";"):
            return

        if line.startswith("[") and line.endswith("]"):
            self._open_section(line[1:-1])
            return

        match self.state:
            case Idle():
                logger.debug("ignoring line outside of any section: %r", line)
            case InSection() as state:
                self.state = self._transition(state, line)

    def document(self) -> Document:
        """Return the sections parsed so far.

        A continuation still pending at this point never received its next
        line and is discarded.
        """
        if isinstance(self.state, InSection):
            self._drop_pending(self.state, "end of input")
            self.state = InSection(self.state.name)

        return Document(self._sections)

    def _open_section(self, name: str) -> None:
        validate_name(name)

        if isinstance(self.state, InSection):
            self._drop_pending(self.state, f"section [{name}]")

        if name in self._sections:
            # Same-named sections are not merged.
            logger.warning(
                "section [%s] declared again; previous entries discarded",
                name,
            )

        logger.debug("opening section [%s]", name)
        self._sections[name] = Section(name=name)
        self.state = InSection(name)

    def _transition(self, state: InSection, line: str) -> InSection:
        section = self._sections[state.name]
        key, sep, value = line.partition("=")

        if not sep:
            match state.continuation:
                case PendingQuoted(key=key, partial=partial) | PendingUnquoted(
                    key=key, partial=partial
                ):
                    entry = Entry.key_value(key, Value.raw(partial + line))
                case None:
                    entry = Entry.only_value(Value.raw(line))

            section.entries.append(entry)
            return InSection(state.name)

        self._drop_pending(state, "a new key/value line")
        key = key.strip()
        value = value.strip()

        if value.startswith('"'):
            return self._quoted(state.name, section, key, value)
        else:
            return self._unquoted(state.name, section, key, value)

    def _quoted(
        self, name: str, section: Section, key: str, value: str
    ) -> InSection:
        end = value.find('"', 1)

        if end == -1:
            raise InvalidQuotedValue(key, name)

        text = value[1:end]
        trailing = value[end + 1 :].strip()

        if not trailing or trailing.startswith(";"):
            section.entries.append(Entry.key_value(key, Value.raw(text)))
            return InSection(name)
        elif trailing == "\\":
            # The backslash is kept as part of the value.
            return InSection(name, PendingQuoted(key, text + "\\"))
        else:
            raise InvalidContinuation(key, name, trailing)

    def _unquoted(
        self, name: str, section: Section, key: str, value: str
    ) -> InSection:
        # Drop a trailing comment.
        value = value.partition(";")[0].strip()

        if not value.endswith("\\"):
            section.entries.append(Entry.key_value(key, Value.raw(value)))
            return InSection(name)

        # Windows treats a run of trailing backslashes as a single
        # continuation marker and ignores the rest of the run.
        prefix = value.rstrip("\\")

        if prefix:
            return InSection(name, PendingUnquoted(key, prefix))
        else:
            return InSection(name)

    @staticmethod
    def _drop_pending(state: InSection, reason: str) -> None:
        if state.continuation is not None:
            logger.warning(
                "continuation of %r in section [%s] dropped by %s",
                state.continuation.key,
                state.name,
                reason,
            )
