import dataclasses

from .entry import Entry
from .errors import InvalidSectionName

# Characters that may not appear anywhere in an unquoted section name.
# TODO: Reject other control characters once it is confirmed Windows does.
_ILLEGAL_UNQUOTED = frozenset('\r\n" \t[];')


@dataclasses.dataclass
class Section:
    name: str
    entries: list[Entry] = dataclasses.field(default_factory=list)


def validate_name(name: str) -> None:
    """Check the text between the brackets of a section header.

    <https://learn.microsoft.com/en-us/windows-hardware/drivers/install/general-syntax-rules-for-inf-files>

    Raises
    ------
    InvalidSectionName
        If `name` is not a valid section name.
    """
    if name.startswith('"'):
        if not name.endswith('"'):
            raise InvalidSectionName(name, "quoted name is not terminated")

        # Checked over the whole name, even inside the quotes.
        if "]" in name:
            raise InvalidSectionName(name, "quoted name contains ']'")

        return

    if name.endswith("\\"):
        raise InvalidSectionName(name, "name ends with '\\'")

    if name.count("%") % 2 == 1:
        raise InvalidSectionName(name, "odd number of '%', expected pairs")

    for c in name:
        if c in _ILLEGAL_UNQUOTED:
            raise InvalidSectionName(name, f"contains invalid character {c!r}")
