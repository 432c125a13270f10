"""Paths: short sequences of symbols addressing nodes in a tree."""

from __future__ import annotations

from collections.abc import Iterator

from mlcore.symbol import Symbol

# Maximum number of symbols in a path; extra symbols are dropped.
MAX_PATH_SYMBOLS = 15


def _parse(text: str, separator: str) -> list[Symbol]:
    text = text.split("\0", 1)[0]
    return [Symbol(part) for part in text.split(separator) if part]


class Path:
    """A sequence of at most 15 symbols with an optional copy number."""

    __slots__ = ("_symbols", "copy")

    def __init__(self, *args: Path | Symbol | str, separator: str = "/") -> None:
        if len(separator) != 1:
            raise ValueError("separator must be a single character")
        symbols: list[Symbol] = []
        for arg in args:
            if isinstance(arg, Path):
                symbols.extend(arg._symbols)
            elif isinstance(arg, Symbol):
                symbols.append(arg)
            elif isinstance(arg, str):
                symbols.extend(_parse(arg, separator))
            else:
                raise TypeError(f"cannot make a Path from {type(arg).__name__}")
        self._symbols: tuple[Symbol, ...] = tuple(symbols[:MAX_PATH_SYMBOLS])
        self.copy = 0

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __getitem__(self, index: int | slice) -> Symbol | Path:
        if isinstance(index, slice):
            return Path(*self._symbols[index])
        return self._symbols[index]

    def __bool__(self) -> bool:
        return bool(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        text = path_to_text(self)
        if self.copy:
            text += f"(#{self.copy})"
        return text

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"


def head(p: Path) -> Symbol:
    """Return the first symbol, or the null symbol for an empty path."""
    return p[0] if p else Symbol()


def tail(p: Path) -> Path:
    """Return all but the first symbol, keeping the copy number."""
    r = Path(*list(p)[1:])
    r.copy = p.copy
    return r


def but_last(p: Path) -> Path:
    """Return all but the last symbol."""
    return Path(*list(p)[:-1])


def last(p: Path) -> Symbol:
    """Return the last symbol, or the null symbol for an empty path."""
    return p[-1] if p else Symbol()


def last_n(p: Path, n: int) -> Path:
    """Return the last n symbols, or an empty path if there are fewer."""
    if n <= 0 or len(p) < n:
        return Path()
    return Path(*list(p)[-n:])


def substitute(p: Path, old: Symbol | str, new: Symbol | str | Path) -> Path:
    """Replace each symbol equal to old by a symbol, or splice in a path."""
    old_sym = Symbol(old)
    if isinstance(new, Path):
        return Path(*(new if s == old_sym else s for s in p))
    new_sym = Symbol(new)
    r = Path(*(new_sym if s == old_sym else s for s in p))
    r.copy = p.copy
    return r


def path_to_text(p: Path, separator: str = "/") -> str:
    """Return the symbols of p joined by the separator."""
    return separator.join(s.text for s in p)


def text_to_path(text: str, separator: str = "/") -> Path:
    """Parse text into a path, splitting at the separator."""
    return Path(text, separator=separator)