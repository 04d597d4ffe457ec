import logging
from functools import partial
from typing import Iterator, NamedTuple, Optional, Sequence

from prettytable import PrettyTable
from typeguard import typechecked

from grammar import GrammarView, NonTerminal, Production, Symbol, Terminal
from utils.fixpoint import iterate_to_fixpoint

logger = logging.getLogger(__name__)

Productions = tuple[tuple[Production, ...], ...]


class ContractViolation(IndexError):
    """An index outside the range declared by the grammar view.

    This is a programming error: the caller paired a table with the wrong
    grammar, or the grammar view handed out an index it never declared.
    """


class FirstsState(NamedTuple):
    """The FIRST sets after some number of passes.

    `firsts[rule]` is a bit-set of token indices, `nullable[rule]` tells
    whether the rule is known to derive ε.
    """

    firsts: tuple[int, ...]
    nullable: tuple[bool, ...]

    @staticmethod
    def initial(rule_count: int) -> "FirstsState":
        return FirstsState((0,) * rule_count, (False,) * rule_count)

    def bits_set(self) -> int:
        return sum(bits.bit_count() for bits in self.firsts)

    def nullable_count(self) -> int:
        return sum(self.nullable)


class FirstOf(NamedTuple):
    tokens: frozenset[int]
    nullable: bool


def members(bits: int) -> frozenset[int]:
    return frozenset(
        token for token in range(bits.bit_length()) if (bits >> token) & 1
    )


def check_index(kind: str, index: int, bound: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise ContractViolation(f"{kind} index must be an int, got {index!r}")
    if not 0 <= index < bound:
        raise ContractViolation(
            f"{kind} index {index} out of range; expected 0 <= index < {bound}"
        )


class FirstSetTable:
    """The FIRST set and nullability of every rule of a grammar.

    For example, given the grammar

        <S> -> <A> 'b'
        <A> -> 'a' |

    then the following assertions (and only the following assertions) hold:

        is_set(S, a), is_set(S, b), is_set(A, a), is_epsilon_set(A)

    Tables are built once by `build` and never change afterwards.
    """

    __slots__ = ("_token_count", "_firsts", "_nullable", "_passes")

    def __init__(self, token_count: int, state: FirstsState, passes: int = 0):
        assert len(state.firsts) == len(state.nullable)
        self._token_count = token_count
        self._firsts = state.firsts
        self._nullable = state.nullable
        self._passes = passes

    @property
    def passes(self) -> int:
        """The number of passes construction took to reach the fixed point."""
        return self._passes

    def rule_count(self) -> int:
        return len(self._firsts)

    def token_count(self) -> int:
        return self._token_count

    def is_set(self, rule: int, token: int) -> bool:
        """Does `token` begin some string derived from `rule`?"""
        check_index("rule", rule, len(self._firsts))
        check_index("token", token, self._token_count)
        return bool((self._firsts[rule] >> token) & 1)

    def is_epsilon_set(self, rule: int) -> bool:
        """Does `rule` derive the empty string?"""
        check_index("rule", rule, len(self._nullable))
        return self._nullable[rule]

    def firsts(self, rule: int) -> frozenset[int]:
        check_index("rule", rule, len(self._firsts))
        return members(self._firsts[rule])

    @typechecked
    def first_of(self, symbols: Sequence[Symbol]) -> FirstOf:
        """The FIRST set of a sequence of symbols.

        A sequence is nullable when every symbol in it is a nullable rule;
        in particular the empty sequence is nullable.
        """
        bits = 0
        for symbol in symbols:
            match symbol:
                case Terminal(index):
                    check_index("token", index, self._token_count)
                    return FirstOf(members(bits | (1 << index)), False)
                case NonTerminal(index):
                    check_index("rule", index, len(self._firsts))
                    bits |= self._firsts[index]
                    if not self._nullable[index]:
                        return FirstOf(members(bits), False)
                case _:
                    raise TypeError(f"expected a symbol, got {symbol!r}")
        return FirstOf(members(bits), True)

    def to_pretty_table(
        self,
        rule_names: Optional[Sequence[str]] = None,
        token_names: Optional[Sequence[str]] = None,
    ) -> PrettyTable:
        table = PrettyTable()
        table.field_names = ["Rule", "FIRST", "Nullable"]
        table.align["FIRST"] = "l"

        for rule, bits in enumerate(self._firsts):
            tokens = sorted(members(bits))
            row: list[str] = [
                rule_names[rule] if rule_names is not None else str(rule),
                "{"
                + ", ".join(
                    token_names[token] if token_names is not None else str(token)
                    for token in tokens
                )
                + "}",
                "ε" if self._nullable[rule] else "",
            ]
            table.add_row(row)

        return table

    def __eq__(self, other):
        if not isinstance(other, FirstSetTable):
            return NotImplemented
        return (self._token_count, self._firsts, self._nullable) == (
            other._token_count,
            other._firsts,
            other._nullable,
        )

    def __hash__(self):
        return hash((self._token_count, self._firsts, self._nullable))

    def __repr__(self):
        return (
            f"FirstSetTable(rules={self.rule_count()}, "
            f"tokens={self._token_count}, passes={self._passes})"
        )

    def __str__(self):
        return str(self.to_pretty_table())


def _snapshot(grammar: GrammarView) -> tuple[int, int, Productions]:
    if not isinstance(grammar, GrammarView):
        raise TypeError(
            f"expected a grammar view with rule_count, token_count and "
            f"productions_of, got {type(grammar).__name__}"
        )

    rule_count, token_count = grammar.rule_count(), grammar.token_count()
    for kind, value in (("rule", rule_count), ("token", token_count)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{kind} count must be an int, got {value!r}")
        if value < 0:
            raise ContractViolation(f"{kind} count must not be negative, got {value}")

    productions: list[tuple[Production, ...]] = []
    for rule in range(rule_count):
        rule_productions = tuple(
            Production(production) for production in grammar.productions_of(rule)
        )
        for production in rule_productions:
            for symbol in production:
                match symbol:
                    case Terminal(index):
                        check_index("token", index, token_count)
                    case NonTerminal(index):
                        check_index("rule", index, rule_count)
                    case _:
                        raise TypeError(
                            f"production of rule {rule} contains {symbol!r}, "
                            f"which is neither a Terminal nor a NonTerminal"
                        )
        productions.append(rule_productions)
    return rule_count, token_count, tuple(productions)


def _step(productions: Productions, state: FirstsState) -> FirstsState:
    """One full pass; returns `state` itself when the pass changes nothing."""
    firsts = list(state.firsts)
    nullable = list(state.nullable)
    changed = False
    for rule, rule_productions in enumerate(productions):
        bits = firsts[rule]
        for production in rule_productions:
            for symbol in production:
                match symbol:
                    case Terminal(token):
                        bits |= 1 << token
                        break
                    case NonTerminal(other):
                        bits |= firsts[other]
                        if not nullable[other]:
                            break
            else:
                # every symbol, if any, can vanish
                if not nullable[rule]:
                    nullable[rule] = True
                    changed = True
            # a self reference must see the tokens this pass added
            if bits != firsts[rule]:
                firsts[rule] = bits
                changed = True
    if not changed:
        return state
    return FirstsState(tuple(firsts), tuple(nullable))


def _iter_passes(
    rule_count: int, token_count: int, productions: Productions
) -> Iterator[FirstsState]:
    # every pass but the last turns on at least one bit
    max_passes = rule_count * (token_count + 1) + 1
    return iterate_to_fixpoint(
        partial(_step, productions), FirstsState.initial(rule_count), max_passes
    )


def iter_passes(grammar: GrammarView) -> Iterator[FirstsState]:
    """Yields the state after each full pass over the grammar.

    The last state yielded is the fixed point, equal to the one before it
    unless the grammar needed a single pass.
    """
    return _iter_passes(*_snapshot(grammar))


def build(grammar: GrammarView) -> FirstSetTable:
    """Computes the FIRST sets of every rule of `grammar`.

    :param grammar: an already validated grammar view
    :return: the converged table
    :raises ContractViolation: if a production refers to an undeclared rule or token
    """
    rule_count, token_count, productions = _snapshot(grammar)
    logger.debug(
        "computing FIRST sets for %d rules over %d tokens", rule_count, token_count
    )

    passes, state = 0, FirstsState.initial(rule_count)
    for passes, state in enumerate(
        _iter_passes(rule_count, token_count, productions), start=1
    ):
        logger.debug(
            "pass %d: %d tokens set, %d rules nullable",
            passes,
            state.bits_set(),
            state.nullable_count(),
        )

    logger.debug("FIRST sets converged after %d passes", passes)
    return FirstSetTable(token_count, state, passes)
