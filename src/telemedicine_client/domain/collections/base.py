"""Ordered, list-backed collection shared by the entity collections."""

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
C = TypeVar("C", bound="EntityCollection")


class EntityCollection(Generic[T]):
    """Ordered sequence of entities with the helpers providers rely on."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = list(items or [])

    def add(self: C, item: T) -> C:
        """Append ``item`` and return the collection for chaining."""
        self._items.append(item)
        return self

    def at(self, index: int) -> T:
        return self._items[index]

    def filter(self: C, predicate: Callable[[T], bool]) -> C:
        """New collection holding the items matching ``predicate``."""
        return type(self)(item for item in self._items if predicate(item))

    def is_empty(self) -> bool:
        return not self._items

    def count(self) -> int:
        return len(self._items)

    def all(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
