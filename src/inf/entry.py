import dataclasses

from .value import Value


@dataclasses.dataclass(frozen=True)
class Entry:
    """Represents a key/value pair (or value only) of a `Section`.

    A `key` of `None` marks a value-only entry, such as the file names
    listed in a CopyFiles section. A keyed entry may have no value at all.
    """

    key: str | None
    value: Value | None

    @classmethod
    def key_value(cls, key: str, value: Value | None) -> "Entry":
        return cls(key=key, value=value)

    @classmethod
    def only_value(cls, value: Value) -> "Entry":
        return cls(key=None, value=value)

    @property
    def is_key_value(self) -> bool:
        return self.key is not None

    @property
    def text(self) -> str | None:
        return None if self.value is None else self.value.text
