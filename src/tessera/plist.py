"""Persistent singly-linked lists.

A list is either the empty list or a ``Cons`` node holding a head and the
list that follows it.  Nodes never change after construction, so any two
lists may share a suffix by reference: ``tail()`` is O(1) and returns the
existing sub-list, ``drop`` returns a shared suffix and ``append`` shares its
argument.

The combinator set follows Haskell's ``Data.List`` (``foldl``, ``foldr``,
``zip_with``, ``intersperse``, ``transpose``...).  Everything that walks a
list does so with a loop rather than Python recursion, so long lists never
hit the interpreter's recursion limit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

from .errors import EmptyListError, IndexOutOfRangeError, InvalidArgumentError, UnsupportedOperationError

E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")


class PList(Generic[E]):
    """Common behaviour of the two list variants (``Empty`` and ``Cons``)."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        raise NotImplementedError

    def head(self) -> E:
        raise NotImplementedError

    def tail(self) -> "PList[E]":
        raise NotImplementedError

    def length(self) -> int:
        count = 0
        node = self
        while isinstance(node, Cons):
            count += 1
            node = node.rest
        return count

    def at(self, k: int) -> E:
        """Item at index ``k`` (the head is at index zero)."""
        if k < 0:
            raise IndexOutOfRangeError(k)
        node = self
        index = k
        while isinstance(node, Cons):
            if index == 0:
                return node.first
            index -= 1
            node = node.rest
        raise IndexOutOfRangeError(k, k - index)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    def add_front(self, x: E) -> "PList[E]":
        return Cons(x, self)

    def append(self, that: "PList[E]") -> "PList[E]":
        """This list followed by ``that``.  O(n) in this list; ``that`` is shared."""
        if isinstance(self, Empty):
            return that
        return _build(self.to_list(), that)

    def reverse(self) -> "PList[E]":
        acc: PList[E] = EMPTY
        for x in self:
            acc = Cons(x, acc)
        return acc

    def take(self, n: int) -> "PList[E]":
        """The first ``n`` elements (all of them if the list is shorter)."""
        if n <= 0:
            return EMPTY
        items = []
        node = self
        while isinstance(node, Cons) and len(items) < n:
            items.append(node.first)
            node = node.rest
        if node.is_empty():
            return self
        return _build(items)

    def drop(self, n: int) -> "PList[E]":
        """The shared suffix after the first ``n`` elements."""
        node = self
        while n > 0 and isinstance(node, Cons):
            node = node.rest
            n -= 1
        return node

    def take_while(self, p: Callable[[E], bool]) -> "PList[E]":
        items = []
        node = self
        while isinstance(node, Cons) and p(node.first):
            items.append(node.first)
            node = node.rest
        if node.is_empty():
            return self
        return _build(items)

    def drop_while(self, p: Callable[[E], bool]) -> "PList[E]":
        node = self
        while isinstance(node, Cons) and p(node.first):
            node = node.rest
        return node

    def filter(self, p: Callable[[E], bool]) -> "PList[E]":
        return _build([x for x in self if p(x)])

    def all(self, p: Callable[[E], bool]) -> bool:
        for x in self:
            if not p(x):
                return False
        return True

    def any(self, p: Callable[[E], bool]) -> bool:
        for x in self:
            if p(x):
                return True
        return False

    def map(self, f: Callable[[E], F]) -> "PList[F]":
        return _build([f(x) for x in self])

    # ------------------------------------------------------------------
    # Folds
    # ------------------------------------------------------------------
    def foldl(self, op: Callable[[F, E], F], accumulator: F) -> F:
        """``(((accumulator op x1) op x2) ... op xk)``"""
        for x in self:
            accumulator = op(accumulator, x)
        return accumulator

    def foldl1(self, op: Callable[[E, E], E]) -> E:
        """``((x1 op x2) ... op xk)``"""
        if isinstance(self, Empty):
            raise UnsupportedOperationError("foldl1")
        return self.rest.foldl(op, self.first)

    def foldr(self, op: Callable[[E, F], F], last: F) -> F:
        """``x1 op (x2 op (... (xk op last)...))``, evaluated from the right."""
        result = last
        for x in reversed(self.to_list()):
            result = op(x, result)
        return result

    def foldr1(self, op: Callable[[E, E], E]) -> E:
        """``x1 op (x2 op (... op xk))``"""
        if isinstance(self, Empty):
            raise UnsupportedOperationError("foldr1")
        items = self.to_list()
        result = items.pop()
        for x in reversed(items):
            result = op(x, result)
        return result

    # ------------------------------------------------------------------
    # Combination
    # ------------------------------------------------------------------
    def zip_with(self, that: "PList[F]", op: Callable[[E, F], G]) -> "PList[G]":
        """Pairwise ``op``; the result is as long as the shorter list."""
        return _build([op(x, y) for x, y in zip(self, that)])

    def intersperse(self, sep: E) -> "PList[E]":
        items = []
        for x in self:
            if items:
                items.append(sep)
            items.append(x)
        return _build(items)

    def group(self, n: int) -> "PList[PList[E]]":
        """Consecutive sublists of size ``n``; the last one may be shorter."""
        if n < 1:
            raise InvalidArgumentError(f"group({n}): n must be > 0")
        chunks = []
        node: PList[E] = self
        while not node.is_empty():
            chunks.append(node.take(n))
            node = node.drop(n)
        return _build(chunks)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def to_list(self) -> List[E]:
        return list(self)

    def to_tuple(self) -> Tuple[E, ...]:
        return tuple(self)

    def to_stream(self) -> Iterator[E]:
        return iter(self)

    # legacy names
    to_array_list = to_list
    list_to_stream = to_stream

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[E]:
        node = self
        while isinstance(node, Cons):
            yield node.first
            node = node.rest

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __getitem__(self, k: int) -> E:
        if not isinstance(k, int):
            raise TypeError(f"list indices must be integers, not {type(k).__name__}")
        return self.at(k)

    def __add__(self, that: Any) -> "PList[E]":
        if not isinstance(that, PList):
            return NotImplemented
        return self.append(that)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PList):
            return NotImplemented
        left, right = self, other
        while isinstance(left, Cons) and isinstance(right, Cons):
            if left is right:
                return True
            if left.first != right.first:
                return False
            left, right = left.rest, right.rest
        return left.is_empty() and right.is_empty()

    def __hash__(self) -> int:
        return hash(("PList", tuple(self)))

    def __str__(self) -> str:
        return "[" + ",".join(str(x) for x in self) + "]"

    def __repr__(self) -> str:
        return f"plist({list(self)!r})"


class Empty(PList[Any]):
    """The empty list.  There is a single shared instance, ``EMPTY``."""

    __slots__ = ()
    _instance: "Empty | None" = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_empty(self) -> bool:
        return True

    def head(self) -> Any:
        raise EmptyListError("head")

    def tail(self) -> PList[Any]:
        raise EmptyListError("tail")

    def length(self) -> int:
        return 0


@dataclass(frozen=True, eq=False, repr=False)
class Cons(PList[E]):
    """A node: ``first`` followed by the (shared) list ``rest``."""

    __slots__ = ("first", "rest")

    first: E
    rest: PList[E]

    def is_empty(self) -> bool:
        return False

    def head(self) -> E:
        return self.first

    def tail(self) -> PList[E]:
        return self.rest


EMPTY: PList[Any] = Empty()


def _build(items: List[E], tail: PList[E] = EMPTY) -> PList[E]:
    """Cons ``items`` (in order) onto ``tail``."""
    xs = tail
    for x in reversed(items):
        xs = Cons(x, xs)
    return xs


# ----------------------------------------------------------------------
# Constructors
# ----------------------------------------------------------------------

def cons(x: E, xs: PList[E]) -> PList[E]:
    """``x:xs``"""
    return xs.add_front(x)


def empty_list() -> PList[Any]:
    return EMPTY


def single(x: E) -> PList[E]:
    return Cons(x, EMPTY)


def concat(xss: PList[PList[E]]) -> PList[E]:
    """Flatten a list of lists."""
    return xss.foldr(lambda xs, acc: xs.append(acc), EMPTY)


def repeat(n: int, x: E) -> PList[E]:
    """``n`` copies of ``x`` (empty if ``n <= 0``)."""
    xs: PList[E] = EMPTY
    for _ in range(n):
        xs = Cons(x, xs)
    return xs


def iterate_while(p: Callable[[E], bool], f: Callable[[E], E], starting_value: E) -> PList[E]:
    """``[s, f(s), f(f(s)), ...]`` for as long as ``p`` holds."""
    items = []
    value = starting_value
    while p(value):
        items.append(value)
        value = f(value)
    return _build(items)


def from_iterable(items: Iterable[E]) -> PList[E]:
    return _build(list(items))


array_to_list = from_iterable
array_list_to_list = from_iterable


def stream_to_list(stream: Iterable[E]) -> PList[E]:
    return from_iterable(list(stream))


def transpose(xss: PList[PList[E]]) -> PList[PList[E]]:
    """Swap rows and columns, Haskell style.

    Rows may be ragged: exhausted rows simply drop out, so
    ``[[1,2,3],[4,5]]`` becomes ``[[1,4],[2,5],[3]]``.
    """
    rows = [row for row in xss if not row.is_empty()]
    columns = []
    while rows:
        columns.append(_build([row.head() for row in rows]))
        rows = [row.tail() for row in rows if not row.tail().is_empty()]
    return _build(columns)


def range_list(a: int, b: int) -> PList[int]:
    """``[a, a+1, ..., b-1]``"""
    return _build(list(range(a, b)))


def range_closed(a: int, b: int) -> PList[int]:
    """``[a, a+1, ..., b]``"""
    return _build(list(range(a, b + 1)))


def range_step(a: int, b: int, c: int) -> PList[int]:
    """``[a, a+c, a+2c, ...]`` up to and possibly including ``b``."""
    if c == 0:
        raise InvalidArgumentError("range_step: step must not be zero")
    if (b - a) * c < 0:
        return EMPTY
    k = abs(b - a) // abs(c)
    return _build([a + i * c for i in range(k + 1)])


def implode(chars: PList[str]) -> str:
    """Join a list of characters into a string."""
    return "".join(chars)


def explode(s: str) -> PList[str]:
    """Split a string into a list of characters."""
    return _build(list(s))


__all__ = [
    "PList",
    "Empty",
    "Cons",
    "EMPTY",
    "cons",
    "empty_list",
    "single",
    "concat",
    "repeat",
    "iterate_while",
    "from_iterable",
    "array_to_list",
    "array_list_to_list",
    "stream_to_list",
    "transpose",
    "range_list",
    "range_closed",
    "range_step",
    "implode",
    "explode",
]
