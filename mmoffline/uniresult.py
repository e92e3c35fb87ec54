"""A flat, string-valued view of a JSON object with ordered field names."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, Union

__all__ = ["UniformJsonObject", "join_fields"]


def join_fields(values: Mapping[str, str], names: Sequence[str], delimiter: str) -> str:
    """Join field values in the order of ``names``.

    The result starts with the first name itself, followed by the values of
    the remaining names, each preceded by ``delimiter``.
    """
    if not names:
        return ""
    parts = [names[0]]
    parts.extend(values.get(name, "") for name in names[1:])
    return delimiter.join(parts)


def _number_text(value: float) -> str:
    return format(float(value), "g")


class UniformJsonObject:
    """JSON object held as ordered field names and string values."""

    def __init__(
        self,
        field_names: Iterable[str] = (),
        values: Optional[Iterable[str]] = None,
    ) -> None:
        self._names: list[str] = list(field_names)
        self._size = len(self._names)
        if values is None:
            self._fields: dict[str, str] = {name: "" for name in self._names}
        else:
            self._fields = dict(zip(self._names, values))

    @classmethod
    def with_size(cls, size: int) -> "UniformJsonObject":
        """Create an object of ``size`` unnamed, empty fields."""
        obj = cls()
        obj._names = [""] * size
        obj._size = size
        obj._fields = {"": ""}
        return obj

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "UniformJsonObject":
        """Convert a parsed JSON object.

        Keys are taken in sorted order. Strings are kept, numbers are written
        in shortest general form, booleans as ``true``/``false``; other values
        leave their field empty.
        """
        result = cls()
        result._names = sorted(obj)
        result._size = len(result._names)
        result._fields = {}
        for key in result._names:
            val = obj[key]
            if isinstance(val, str):
                result._fields[key] = val
            elif isinstance(val, bool):
                result._fields[key] = "true" if val else "false"
            elif isinstance(val, (int, float)):
                result._fields[key] = _number_text(val)
        return result

    def _name_at(self, index: int) -> str:
        if index < 0:
            raise IndexError(index)
        return self._names[index]

    def __getitem__(self, key: Union[int, str]) -> str:
        name = self._name_at(key) if isinstance(key, int) else key
        return self._fields.setdefault(name, "")

    def __setitem__(self, key: Union[int, str], value: str) -> None:
        name = self._name_at(key) if isinstance(key, int) else key
        self._fields[name] = value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        pairs = ", ".join(f"{n!r}: {self._fields.get(n, '')!r}" for n in self._names)
        return f"UniformJsonObject({{{pairs}}})"

    def push(self, value: str) -> "UniformJsonObject":
        """Store ``value`` in the first field that is still empty."""
        for name in self._names[: self._size]:
            if not self._fields.get(name, ""):
                self._fields[name] = value
                break
        return self

    def at(self, index: int) -> str:
        """Return the value of the field at ``index``."""
        return self._fields.get(self._name_at(index), "")

    def to_string(self) -> str:
        """Render the fields as quoted name/value lines."""
        lines = "".join(
            f'"{name}":"{self._fields.get(name, "")}",\n' for name in self._names
        )
        return "{" + lines + "{\n"

    def keys(self) -> list[str]:
        """Return the field names in order."""
        return list(self._names)

    def value(self, key: str) -> str:
        """Return the value stored under ``key``, or an empty string."""
        return self._fields.get(key, "")

    def set_keys(self, keys: Iterable[str]) -> None:
        """Reset the object to the given field names with empty values."""
        self._names = list(keys)
        self._size = len(self._names)
        self._fields = {name: "" for name in self._names}

    def set_fields(self, values: Sequence[str]) -> None:
        """Replace all values; ignored when fewer values than fields are given."""
        if len(values) < self._size:
            return
        self._fields = dict(zip(self._names[: self._size], values))

    def add_field(self, key: str, value: str) -> None:
        """Append a field."""
        self._names.append(key)
        self._fields[key] = value
        self._size += 1

    def map_values(self, names: Iterable[str]) -> list[str]:
        """Return the values of ``names``; raise KeyError for an absent field."""
        mapped = []
        for name in names:
            if name not in self._fields:
                raise KeyError(name)
            mapped.append(self._fields[name])
        return mapped

    def map_values_with_defaults(
        self, names: Sequence[str], defaults: Sequence[str]
    ) -> list[str]:
        """Return the values of ``names``, using ``defaults`` for absent fields."""
        if len(names) != len(defaults):
            raise ValueError("names and defaults differ in length")
        return [
            self._fields[name] if name in self._fields else default
            for name, default in zip(names, defaults)
        ]

    def make_table_definition(self) -> str:
        """Return a column list suitable for a table definition."""
        return "( " + " , ".join(self._names) + " ) "

    def make_table_insertion(self) -> str:
        """Return a value list suitable for an insertion."""
        return "( " + join_fields(self._fields, self._names, " , ") + " )"