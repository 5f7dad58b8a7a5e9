"""Container shapes understood by the traversal generator."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
P = TypeVar("P")


@dataclass
class Box(Generic[T]):
    """Owning single-child cell.

    A record field holding a Box can have its child swapped in place
    (`node.left.value = other`) by a mutable visitor.
    """
    value: T


@dataclass
class Pair(Generic[T, P]):
    """One element of a Delimited list and the punctuation that follows it."""
    item: T
    punct: Optional[P] = None


class Delimited(Generic[T, P]):
    """A sequence of items separated by punctuation tokens.

    The punctuation after the last item is optional (trailing separator).
    Iterating yields `Pair` elements in order.
    """

    def __init__(self, pairs: Iterable[tuple[T, Optional[P]]] = ()):
        self._pairs: list[Pair[T, P]] = [Pair(item, punct) for item, punct in pairs]

    def push(self, item: T) -> None:
        """Append an item; the previous item must already carry punctuation."""
        if self._pairs and self._pairs[-1].punct is None:
            raise ValueError("Delimited.push() needs punctuation after the previous item")
        self._pairs.append(Pair(item))

    def push_punct(self, punct: P) -> None:
        if not self._pairs or self._pairs[-1].punct is not None:
            raise ValueError("Delimited.push_punct() needs a preceding item")
        self._pairs[-1].punct = punct

    def items(self) -> list[T]:
        return [pair.item for pair in self._pairs]

    def pairs(self) -> Iterator[tuple[T, Optional[P]]]:
        for pair in self._pairs:
            yield pair.item, pair.punct

    def trailing_punct(self) -> bool:
        return bool(self._pairs) and self._pairs[-1].punct is not None

    def __iter__(self) -> Iterator[Pair[T, P]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __getitem__(self, index: int) -> T:
        return self._pairs[index].item

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Delimited):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"Delimited({list(self.pairs())!r})"
