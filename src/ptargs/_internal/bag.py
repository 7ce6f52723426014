"""ParameterBag protocol: the read-only view handed to parameter consumers.

Code that only reads decoded transport parameters (the CLI renderers, or a
transport's option handling) types against this instead of ``Args``.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class ParameterBag(Protocol):
    """Keys owning one or more string values, in order of appearance.

    A key is present only while it has at least one value, so
    ``lookup(key)[1]`` and ``key in bag`` always agree.
    """

    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def lookup(self, key: str) -> tuple[str, bool]: ...
    def get_list(self, key: str) -> list[str]: ...
    def multi_items(self) -> Iterator[tuple[str, str]]: ...
