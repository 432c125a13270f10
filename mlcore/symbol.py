"""Interned symbols: cheap, immutable keys that map to unique text."""

from __future__ import annotations

import functools
import threading

HASH_TABLE_BITS = 12
HASH_TABLE_SIZE = 1 << HASH_TABLE_BITS
HASH_TABLE_MASK = HASH_TABLE_SIZE - 1

_U32 = 0xFFFFFFFF


def kr_hash(text: str | bytes) -> int:
    """Return the Kernighan & Ritchie hash of text, folded to the table size."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    accum = 0
    for byte in reversed(data):
        # Bytes are summed as signed chars.
        signed = byte - 256 if byte >= 128 else byte
        accum = ((accum + signed) * 31) & _U32
    return accum & HASH_TABLE_MASK


class SymbolTable:
    """Table assigning each distinct text an ID in order of creation."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._texts: list[str] = []
        self._ids: dict[str, int] = {}
        self._bins: dict[int, list[int]] = {}
        self.clear()

    def clear(self) -> None:
        """Remove all symbols, leaving only the null entry with ID 0."""
        with self._lock:
            self._texts = []
            self._ids = {}
            self._bins = {}
            self._add_entry("")

    def _add_entry(self, text: str) -> int:
        new_id = len(self._texts)
        self._texts.append(text)
        self._ids[text] = new_id
        self._bins.setdefault(kr_hash(text), []).append(new_id)
        return new_id

    def get_symbol_id(self, text: str) -> int:
        """Return the ID of text, adding it to the table if it is new."""
        if not isinstance(text, str):
            raise TypeError(f"symbol text must be str, not {type(text).__name__}")
        with self._lock:
            found = self._ids.get(text)
            if found is not None:
                return found
            return self._add_entry(text)

    def get_symbol_text(self, symbol_id: int) -> str:
        """Return the text stored for an ID."""
        return self._texts[symbol_id]

    def __len__(self) -> int:
        return len(self._texts)

    def audit(self) -> bool:
        """Check that every stored text looks up to its own ID."""
        for index, text in enumerate(list(self._texts)):
            found = self.get_symbol_id(text)
            if found != index or found > len(self._texts):
                print(f"SymbolTable: error in symbol table, line {index}:")
                print(f"    ID {index} = {text}, ID B = {found}")
                return False
        return True

    def dump(self) -> None:
        """Print the symbols in creation order, then the non-empty hash bins."""
        print("-" * 57)
        print(f"{len(self._texts)} symbols:")
        for index, text in enumerate(self._texts):
            print(f"    ID {index} = {text}")
        for hash_value in sorted(self._bins):
            entries = " ".join(f"{sid} {self._texts[sid]}" for sid in self._bins[hash_value])
            print(f"#{hash_value} {entries} ")

    def hash_of_id(self, symbol_id: int) -> int:
        """Return the hash bin holding an ID, or 0 if it is not in the table."""
        for hash_value in sorted(self._bins):
            if symbol_id in self._bins[hash_value]:
                return hash_value
        return 0


@functools.lru_cache(maxsize=None)
def symbol_table() -> SymbolTable:
    """Return the table shared by all symbols."""
    return SymbolTable()


class Symbol:
    """An immutable key standing for a text in the shared symbol table."""

    __slots__ = ("_id",)

    def __init__(self, text: str | Symbol = "") -> None:
        if isinstance(text, Symbol):
            self._id = text._id
        elif isinstance(text, str):
            self._id = symbol_table().get_symbol_id(text)
        else:
            raise TypeError(f"cannot make a Symbol from {type(text).__name__}")

    @property
    def text(self) -> str:
        """The text this symbol stands for."""
        return symbol_table().get_symbol_text(self._id)

    @property
    def id(self) -> int:
        """The ID of this symbol, equal to its order of creation."""
        return self._id

    def begins_with(self, other: Symbol | str) -> bool:
        """Return True if this symbol's text starts with the other's."""
        return self.text.startswith(Symbol(other).text)

    def ends_with(self, other: Symbol | str) -> bool:
        """Return True if this symbol's text ends with the other's."""
        return self.text.endswith(Symbol(other).text)

    def hash_from_table(self) -> int:
        """Return the hash bin holding this symbol in the shared table."""
        return symbol_table().hash_of_id(self._id)

    def __add__(self, other: Symbol | str) -> Symbol:
        if not isinstance(other, (Symbol, str)):
            return NotImplemented
        return Symbol(self.text + Symbol(other).text)

    def __lt__(self, other: Symbol) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self._id < other._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return self._id

    def __bool__(self) -> bool:
        return self._id != 0

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Symbol({self.text!r})"


def symbol_hash(sym: Symbol) -> int:
    """Return the table hash of a symbol's text."""
    return kr_hash(sym.text)