"""A recursive map from paths to values, keyed by symbols at each level."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from mlcore.path import Path
from mlcore.symbol import Symbol

V = TypeVar("V")


def _as_path(p: Path | Symbol | str) -> Path:
    return p if isinstance(p, Path) else Path(p)


class Tree(Generic[V]):
    """A node holding an optional value and a map of named child nodes.

    The null value marks a node without a value; it is None unless given.
    Children are kept in the order of their symbols' creation.
    """

    def __init__(self, value: V | None = None, null: Any = None) -> None:
        self._null = null
        self._value = null if value is None else value
        self._children: dict[Symbol, Tree[V]] = {}

    def _is_null(self, v: Any) -> bool:
        return v is self._null or v == self._null

    def _new_node(self, value: Any = None) -> Tree[V]:
        return Tree(value, null=self._null)

    def _ordered_children(self) -> list[tuple[Symbol, Tree[V]]]:
        return sorted(self._children.items(), key=lambda item: item[0].id)

    def clear(self) -> None:
        """Remove every child and the value of this node."""
        self._children = {}
        self._value = self._null

    def combine(self, other: Tree[V]) -> None:
        """Add every value of another tree to this one, overwriting at equal paths."""
        for path, value in other.items():
            self.add(path, value)

    def has_value(self) -> bool:
        """Return True if this node holds a value other than the null value."""
        return not self._is_null(self._value)

    def is_leaf(self) -> bool:
        """Return True if this node has no children."""
        return not self._children

    def get_node(self, path: Path | Symbol | str) -> Tree[V] | None:
        """Return the node at path, or None if there is none."""
        node: Tree[V] = self
        for name in _as_path(path):
            child = node._children.get(name)
            if child is None:
                return None
            node = child
        return node

    def __getitem__(self, path: Path | Symbol | str) -> V:
        node = self.get_node(path)
        return self._null if node is None else node._value

    def __setitem__(self, path: Path | Symbol | str, value: V) -> None:
        self.add(path, value)

    def add(self, path: Path | Symbol | str, value: V) -> Tree[V]:
        """Store value at path, making any missing nodes; return the node."""
        path = _as_path(path)
        if not path:
            raise ValueError("cannot add a value at an empty path")
        node: Tree[V] = self
        for name in list(path)[:-1]:
            child = node._children.get(name)
            if child is None:
                child = self._new_node()
                node._children[name] = child
            node = child
        final = path[-1]
        child = node._children.get(final)
        if child is None:
            child = self._new_node(value)
            node._children[final] = child
        else:
            child._value = self._null if value is None else value
        return child

    def walk(self) -> Iterator[tuple[Path, int, V]]:
        """Yield (path, depth, value) for each node with a value, parents first.

        Direct children of this node have depth 0.
        """

        def visit(node: Tree[V], prefix: Path, depth: int) -> Iterator[tuple[Path, int, V]]:
            for name, child in node._ordered_children():
                path = Path(prefix, name)
                if child.has_value():
                    yield path, depth, child._value
                yield from visit(child, path, depth + 1)

        yield from visit(self, Path(), 0)

    def items(self) -> Iterator[tuple[Path, V]]:
        """Yield (path, value) for each node with a value, parents first."""
        for path, _depth, value in self.walk():
            yield path, value

    def __iter__(self) -> Iterator[V]:
        for _path, _depth, value in self.walk():
            yield value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        mine = [(path[-1], value) for path, _d, value in self.walk()]
        theirs = [(path[-1], value) for path, _d, value in other.walk()]
        return mine == theirs

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return int(self.has_value()) + sum(len(c) for c in self._children.values())

    def dump(self) -> None:
        """Print each path and value that the tree holds."""
        for path, value in self.items():
            print(f"{path} [{value}] ")


def tree_node_exists(tree: Tree[Any], path: Path | Symbol | str) -> bool:
    """Return True if the tree has a node at path, with or without a value."""
    return tree.get_node(path) is not None


def keep_nodes_in_list(tree: Tree[V], paths: Iterable[Path | Symbol | str]) -> Tree[V]:
    """Return a new tree with only the values whose paths are listed."""
    wanted = {_as_path(p) for p in paths}
    filtered: Tree[V] = Tree(null=tree._null)
    for path, value in tree.items():
        if path in wanted:
            filtered[path] = value
    return filtered