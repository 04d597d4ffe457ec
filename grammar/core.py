from abc import ABC
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence, runtime_checkable


class Symbol(ABC):
    """A symbol in a production;
    Each is identified by its dense index into the grammar's rules or tokens"""

    __slots__ = ()

    index: int


@dataclass(frozen=True, slots=True)
class Terminal(Symbol):
    index: int

    def __str__(self):
        return f"'{self.index}'"


@dataclass(frozen=True, slots=True)
class NonTerminal(Symbol):
    index: int

    def __str__(self):
        return f"<{self.index}>"


class Production(tuple[Symbol, ...]):
    def __new__(cls, args: Optional[Iterable[Symbol]] = None) -> "Production":
        if args is None:
            args = []
        return tuple.__new__(Production, args)  # type: ignore

    @staticmethod
    def empty() -> "Production":
        return Production()

    def is_empty(self) -> bool:
        return not self

    def __str__(self):
        if not self:
            return "ε"
        return " ".join(str(symbol) for symbol in self)

    def __repr__(self):
        return f"Production({list(self)!r})"


@runtime_checkable
class GrammarView(Protocol):
    """The read-only view of an already validated grammar.

    Rules and tokens are numbered densely from zero.
    """

    def rule_count(self) -> int:
        ...

    def token_count(self) -> int:
        ...

    def productions_of(self, rule: int) -> Sequence[Sequence[Symbol]]:
        ...
