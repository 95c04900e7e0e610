import dataclasses
import enum


class ValueKind(enum.IntEnum):
    RAW = enum.auto()

    # Reserved for finer-grained typing of values; the parser only ever
    # produces `RAW`.
    LIST = enum.auto()
    COMMA_SEPARATED = enum.auto()


@dataclasses.dataclass(frozen=True)
class Value:
    kind: ValueKind
    data: str | tuple[str, ...]

    @classmethod
    def raw(cls, text: str) -> "Value":
        return cls(kind=ValueKind.RAW, data=text)

    @classmethod
    def list_of(cls, items: list[str] | tuple[str, ...]) -> "Value":
        return cls(kind=ValueKind.LIST, data=tuple(items))

    @classmethod
    def comma_separated(cls, items: list[str] | tuple[str, ...]) -> "Value":
        return cls(kind=ValueKind.COMMA_SEPARATED, data=tuple(items))

    @property
    def text(self) -> str:
        """The value as it appeared in the file.

        Sequence values are joined back together with commas.
        """
        if isinstance(self.data, str):
            return self.data

        return ",".join(self.data)
