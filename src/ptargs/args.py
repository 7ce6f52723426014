"""Decoded transport parameters: an ordered multi-map of string to strings.

Implements ``Mapping[str, str]`` and the ``ParameterBag`` protocol.
"""

from collections.abc import Iterable, Iterator, Mapping


class Args(Mapping[str, str]):
    """Key to ordered list of values, as decoded from a parameter string.

    Attributes:
        _data: field name -> list of values, in order of appearance.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    A key is only ever present with at least one value. An empty string is
    a valid value; an empty list is not, so keys given with no values on
    construction are dropped.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, data: "Args | Mapping[str, Iterable[str]] | None" = None) -> None:
        self._data = {}
        if not data:
            return
        if isinstance(data, Args):
            # Args.items() yields first values only; copy the full lists.
            self._data = data.to_dict()
            return
        for key, values in data.items():
            if isinstance(values, str):
                raise TypeError(f"values for {key!r} must be an iterable of str, not a str")
            for value in values:
                self.add(key, value)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Args):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Args({self._data!r})"

    def add(self, key: str, value: str) -> None:
        """Append *value* to the list of values for *key*."""
        self._data.setdefault(key, []).append(value)

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def lookup(self, key: str) -> tuple[str, bool]:
        """Return ``(first_value, True)``, or ``("", False)`` if *key* is missing.

        Distinguishes a missing key from a key whose first value is ``""``.
        """
        values = self._data.get(key)
        if values:
            return values[0], True
        return "", False

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def multi_items(self) -> Iterator[tuple[str, str]]:
        """Yield every ``(key, value)`` pair, grouped by key in insertion order."""
        for key, values in self._data.items():
            for value in values:
                yield key, value

    def to_dict(self) -> dict[str, list[str]]:
        """Return a plain ``dict`` copy of key -> values."""
        return {key: list(values) for key, values in self._data.items()}
