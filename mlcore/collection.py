"""Collections: trees of objects addressed by paths, with sub-collections."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from mlcore.path import Path
from mlcore.symbol import Symbol
from mlcore.tree import Tree

T = TypeVar("T")

PathLike = Path | Symbol | str


class Collection(Generic[T]):
    """A view onto a tree of objects.

    A collection made without a tree is the null collection: it is empty
    and ignores additions.
    """

    def __init__(self, tree: Tree[T] | None = None) -> None:
        self._tree = tree

    def __iter__(self) -> Iterator[T]:
        if self._tree is None:
            return iter(())
        return iter(self._tree)

    def __getitem__(self, path: PathLike) -> T | None:
        if self._tree is None:
            return None
        return self._tree[path]

    def find(self, path: PathLike) -> T | None:
        """Return the object at path, or None if there is none."""
        if self._tree is None:
            return None
        node = self._tree.get_node(path)
        if node is not None and node.has_value():
            return node[Path()]
        return None

    def add(self, path: PathLike, obj: T) -> None:
        """Put obj into the collection at path."""
        if self._tree is None:
            return
        self._tree.add(path, obj)

    def add_unique(self, path: PathLike, factory: Callable[..., T], *args: Any) -> None:
        """Create an object with factory(*args) and put it at path."""
        if self._tree is None:
            return
        self._tree.add(path, factory(*args))

    def add_unique_with_collection(
        self, path: PathLike, factory: Callable[..., T], *args: Any
    ) -> None:
        """Create an object with factory(sub_collection, *args) and put it at path.

        The sub-collection refers to the object's own location, so the
        object can add children to it while it is being made.
        """
        if self._tree is None:
            return
        self._tree.add(path, None)
        sub = self.get_sub_collection(path)
        self._tree[path] = factory(sub, *args)

    def get_sub_collection(self, path: PathLike) -> Collection[T]:
        """Return the collection below path, or the null collection."""
        if self._tree is None:
            return Collection()
        node = self._tree.get_node(path)
        return Collection(node) if node is not None else Collection()

    def items(self) -> Iterator[tuple[Path, T]]:
        """Yield (path, object) for every object, parents first."""
        if self._tree is None:
            return
        yield from self._tree.items()

    def child_items(self) -> Iterator[tuple[Path, T]]:
        """Yield (path, object) for the direct children of the root only."""
        if self._tree is None:
            return
        for path, depth, obj in self._tree.walk():
            if depth == 0:
                yield path, obj

    def for_each(self, fn: Callable[[T], Any]) -> None:
        """Call fn with every object in the collection."""
        for _path, obj in self.items():
            fn(obj)

    def for_each_child(self, fn: Callable[[T], Any]) -> None:
        """Call fn with each direct child of the collection's root."""
        for _path, obj in self.child_items():
            fn(obj)

    def dump(self) -> None:
        """Print each path and object in the collection."""
        for path, obj in self.items():
            print(f"{path} [{obj}] ")

    def __len__(self) -> int:
        return 0 if self._tree is None else len(self._tree)


class CollectionRoot(Collection[T]):
    """A collection that owns its tree."""

    def __init__(self) -> None:
        super().__init__(Tree())

    def clear(self) -> None:
        """Remove every object."""
        assert self._tree is not None
        self._tree.clear()