from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple

from .errors import NoAssociatedValue


class NamedValues:
    """One-to-one mapping of ``(slot, raw value)`` to ``(slot, name)``.

    Both directions are built together on construction and never change
    afterwards. A pair that would reuse an existing value or name under the
    same slot is rejected with ``ValueError``.
    """

    __slots__ = ("_by_value", "_by_name")

    def __init__(self, pairs: Iterable[Tuple[int, int, str]] = ()):
        self._by_value: Dict[Tuple[int, int], str] = {}
        self._by_name: Dict[Tuple[int, str], int] = {}
        for slot, value, name in pairs:
            slot = int(slot)
            value = int(value)
            name = str(name)
            if (slot, value) in self._by_value:
                raise ValueError(f"duplicate value {value} for arg {slot}")
            if (slot, name) in self._by_name:
                raise ValueError(f"duplicate name {name!r} for arg {slot}")
            self._by_value[(slot, value)] = name
            self._by_name[(slot, name)] = value

    def get_name(self, slot: int, value: int) -> Optional[str]:
        return self._by_value.get((int(slot), int(value)))

    def get_value(self, slot: int, name: str) -> int:
        try:
            return self._by_name[(int(slot), str(name))]
        except KeyError:
            raise NoAssociatedValue(slot, name) from None

    def slots(self):
        return sorted({s for s, _ in self._by_value})

    def __iter__(self) -> Iterator[Tuple[int, int, str]]:
        for (slot, value), name in self._by_value.items():
            yield slot, value, name

    def __len__(self):
        return len(self._by_value)

    def __bool__(self):
        return bool(self._by_value)

    def __eq__(self, other):
        if not isinstance(other, NamedValues):
            return NotImplemented
        return self._by_value == other._by_value

    def __repr__(self):
        return f"NamedValues({list(self)!r})"
