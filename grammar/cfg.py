import re
from collections import defaultdict, deque
from itertools import count
from typing import Iterable, Iterator, Sequence

from more_itertools import sliced, unique_everseen
from typeguard import typechecked

from .core import NonTerminal, Production, Symbol, Terminal


def is_rule_reference(name: str) -> bool:
    return len(name) > 2 and name.startswith("<") and name.endswith(">")


class IndexedGrammar:
    """A grammar whose rules and tokens are resolved to dense indices.

    Rules are numbered in the order they are first defined, tokens in the
    order they are declared and then first used.
    """

    __slots__ = ("rule_names", "token_names", "_productions", "_rule_ids", "_token_ids")

    def __init__(
        self,
        rule_names: Sequence[str],
        token_names: Sequence[str],
        productions: Sequence[Sequence[Production]],
    ):
        if len(rule_names) != len(productions):
            raise ValueError(
                f"{len(rule_names)} rule names given for "
                f"{len(productions)} lists of productions"
            )
        self.rule_names: tuple[str, ...] = tuple(rule_names)
        self.token_names: tuple[str, ...] = tuple(token_names)
        self._productions = tuple(tuple(prods) for prods in productions)
        self._rule_ids = {name: idx for idx, name in enumerate(self.rule_names)}
        self._token_ids = {name: idx for idx, name in enumerate(self.token_names)}

    def rule_count(self) -> int:
        return len(self.rule_names)

    def token_count(self) -> int:
        return len(self.token_names)

    def productions_of(self, rule: int) -> tuple[Production, ...]:
        return self._productions[rule]

    def iter_productions(self) -> Iterator[tuple[int, Production]]:
        for rule, productions in enumerate(self._productions):
            for production in productions:
                yield rule, production

    def rule_idx(self, name: str) -> int:
        try:
            return self._rule_ids[name]
        except KeyError:
            raise KeyError(f"no rule named {name!r}") from None

    def token_idx(self, name: str) -> int:
        try:
            return self._token_ids[name]
        except KeyError:
            raise KeyError(f"no token named {name!r}") from None

    def rule_name(self, rule: int) -> str:
        return self.rule_names[rule]

    def token_name(self, token: int) -> str:
        return self.token_names[token]

    def symbol_str(self, symbol: Symbol) -> str:
        match symbol:
            case Terminal(index):
                return f"'{self.token_names[index]}'"
            case NonTerminal(index):
                return f"<{self.rule_names[index]}>"
            case _:
                raise TypeError(f"expected a symbol, got {symbol!r}")

    def production_str(self, production: Production) -> str:
        if not production:
            return "<>"
        return " ".join(self.symbol_str(symbol) for symbol in production)

    def __str__(self) -> str:
        return "\n".join(
            f"<{self.rule_names[rule]}> -> {self.production_str(production)}"
            for rule, production in self.iter_productions()
        )

    def __repr__(self) -> str:
        return (
            f"IndexedGrammar(rules={self.rule_count()}, tokens={self.token_count()})"
        )

    @staticmethod
    def from_str(
        grammar_str: str,
        tokens: Iterable[str] = (),
        transform_regex_to_right: bool = False,
    ) -> "IndexedGrammar":
        return _parse_grammar(grammar_str, tokens, transform_regex_to_right)

    class Builder:
        """Collects productions by name and resolves them to indices.

        A symbol written `<name>` refers to a rule, any other string names a token.
        """

        __slots__ = ("_dict", "_tokens")

        def __init__(self, tokens: Iterable[str] = ()) -> None:
            self._dict: dict[str, list[tuple[str, ...]]] = defaultdict(list)
            self._tokens: list[str] = list(tokens)

        def add_token(self, name: str) -> "IndexedGrammar.Builder":
            self._tokens.append(name)
            return self

        def add_rule(self, origin: str) -> "IndexedGrammar.Builder":
            """Reserves an index for `origin` without giving it a production."""
            self._dict[origin]  # pylint: disable=pointless-statement
            return self

        @typechecked
        def add_production(
            self, origin: str, seq: Sequence[str]
        ) -> "IndexedGrammar.Builder":
            if is_rule_reference(origin):
                origin = origin[1:-1]
            if not origin:
                raise ValueError("a rule must have a name")
            self._dict[origin].append(tuple(seq))
            return self

        def build(self) -> "IndexedGrammar":
            if not self._dict:
                raise ValueError("grammar must have at least one rule")

            rule_names = list(self._dict)
            rule_ids = {name: idx for idx, name in enumerate(rule_names)}
            token_names = list(
                unique_everseen(
                    self._tokens
                    + [
                        name
                        for seqs in self._dict.values()
                        for seq in seqs
                        for name in seq
                        if not is_rule_reference(name)
                    ]
                )
            )
            clashes = set(token_names) & set(rule_ids)
            if clashes:
                raise ValueError(
                    f"names used both as a rule and as a token: {sorted(clashes)}"
                )
            token_ids = {name: idx for idx, name in enumerate(token_names)}

            def resolve(origin: str, name: str) -> Symbol:
                if not is_rule_reference(name):
                    return Terminal(token_ids[name])
                if name[1:-1] not in rule_ids:
                    raise ValueError(
                        f"rule <{origin}> refers to <{name[1:-1]}> "
                        f"which is not defined"
                    )
                return NonTerminal(rule_ids[name[1:-1]])

            return IndexedGrammar(
                rule_names,
                token_names,
                [
                    [
                        Production(resolve(origin, name) for name in seq)
                        for seq in self._dict[origin]
                    ]
                    for origin in rule_names
                ],
            )


def iter_symbol_tokens(input_str: str) -> Iterator[str]:
    input_str = input_str.strip()
    while input_str:
        if m := re.match(r"^\|", input_str):
            yield m.group(0)
        elif m := re.match(r"<\w*>[?*+]?", input_str):  # NonTerminal
            yield m.group(0)
        elif m := re.match(r"((?<!')\(.*\)(?!')[?*+]?)", input_str):  # Grouped items
            yield m.group(0)
        elif m := re.match(r"'[^']+'[?*+]?", input_str):  # any literal
            yield m.group(0)
        elif m := re.match(r"\w+[?*+]?", input_str):  # keyword
            yield m.group(0)
        else:
            raise ValueError(f"Invalid token: {input_str}")
        input_str = input_str[m.end() :].strip()


def _parse_grammar(
    grammar_str: str,
    tokens: Iterable[str] = (),
    transform_regex_to_right_recursive: bool = False,
) -> IndexedGrammar:
    """Ad Hoc grammar parser"""
    grammar_builder = IndexedGrammar.Builder(tokens)
    temps_counter = count(0)
    parts = re.split(r"<(\w+)>\s*->", grammar_str.strip())
    if parts[0].strip():
        raise ValueError(f"expected a rule definition, got {parts[0].strip()!r}")
    # helper rule names must not collide with rules the grammar defines itself
    taken = set(parts[1::2])

    def fresh_name(prefix: str) -> str:
        while (name := f"{prefix}_{next(temps_counter)}") in taken:
            pass
        return name

    for origin_str, definition_str in sliced(parts[1:], n=2, strict=True):
        queue: deque[tuple[str, str]] = deque([(origin_str, definition_str)])
        while queue:
            origin, expansion = queue.popleft()
            grammar_builder.add_rule(origin)
            rule: list[str] = []
            for lexeme in iter_symbol_tokens(expansion):
                if lexeme == "|":
                    grammar_builder.add_production(origin, rule)
                    rule = []
                elif lexeme[-1] in "?*+" and len(lexeme) > 1:
                    if lexeme.startswith("("):
                        R = fresh_name("R")
                        queue.append((R, lexeme[1:-2]))
                    elif lexeme.startswith("<"):
                        R = lexeme[1:-2]
                    else:
                        R = fresh_name("R")
                        queue.append((R, lexeme[:-1]))

                    N = fresh_name("N")
                    if lexeme.endswith("?"):
                        # R? ⇒    N → ε
                        #         N → R
                        grammar_builder.add_production(N, ())
                        grammar_builder.add_production(N, (f"<{R}>",))
                    elif lexeme.endswith("*"):
                        # R* ⇒    N → ε
                        grammar_builder.add_production(N, ())
                        if transform_regex_to_right_recursive:
                            # N → R N
                            grammar_builder.add_production(N, (f"<{R}>", f"<{N}>"))
                        else:
                            # N → N R
                            grammar_builder.add_production(N, (f"<{N}>", f"<{R}>"))
                    else:
                        # R+ ⇒    N → R
                        grammar_builder.add_production(N, (f"<{R}>",))
                        if transform_regex_to_right_recursive:
                            # N -> R N
                            grammar_builder.add_production(N, (f"<{R}>", f"<{N}>"))
                        else:
                            # N → N R
                            grammar_builder.add_production(N, (f"<{N}>", f"<{R}>"))
                    rule.append(f"<{N}>")
                elif lexeme == "<>":
                    continue
                elif lexeme.startswith("<"):
                    rule.append(lexeme)
                elif lexeme.startswith("("):
                    R = fresh_name("R")
                    queue.append((R, lexeme[1:-1]))
                    rule.append(f"<{R}>")
                elif lexeme.startswith("'"):
                    rule.append(lexeme[1:-1])
                else:
                    # keywords
                    rule.append(lexeme)
            grammar_builder.add_production(origin, rule)

    return grammar_builder.build()
