from collections.abc import Iterator, Mapping

from .section import Section


class Document(Mapping[str, Section]):
    """Sections of an INF file, keyed by section name.

    Iteration follows the order in which section names were first declared.
    Lookups are case-sensitive and match the name exactly as written in the
    header, even though Windows itself treats section names as
    case-insensitive.

    <https://learn.microsoft.com/en-us/windows-hardware/drivers/install/general-syntax-rules-for-inf-files#-case-sensitivity>
    """

    def __init__(self, sections: dict[str, Section]) -> None:
        self._sections = sections

    def __getitem__(self, name: str) -> Section:
        return self._sections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"Document({list(self._sections)!r})"

    @property
    def sections(self) -> list[Section]:
        return list(self._sections.values())

    def as_dict(self) -> dict[str, list[tuple[str | None, str | None]]]:
        """Return plain `(key, text)` pairs for every section.

        Value-only entries have a key of `None`.
        """
        d: dict[str, list[tuple[str | None, str | None]]] = {}

        # Each element represents a single directive in the file.
        for name, section in self._sections.items():
            d[name] = [(entry.key, entry.text) for entry in section.entries]

        return d
