import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from rich import print as print_rich
from rich.logging import RichHandler
from rich.markup import escape
from rich.traceback import install

from firsts import build
from grammar import IndexedGrammar
from utils.grammars import EXAMPLES

install(show_locals=False)

logger = logging.getLogger(__name__)


def load_grammar(
    source: str, tokens: Sequence[str] = (), right_recursive: bool = False
) -> IndexedGrammar:
    """Reads a bundled example grammar by name, or a grammar file by path."""
    if source in EXAMPLES:
        grammar_str = EXAMPLES[source]
    else:
        grammar_str = Path(source).read_text(encoding="utf-8")
    return IndexedGrammar.from_str(grammar_str, tokens, right_recursive)


def make_argument_parser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="firsts",
        description="Compute the FIRST sets and nullable rules of a grammar",
    )
    argparser.add_argument(
        "grammar",
        nargs="?",
        default="expression",
        help=f"a grammar file, or one of: {', '.join(EXAMPLES)}",
    )
    argparser.add_argument(
        "--token",
        action="append",
        default=[],
        dest="tokens",
        help="declare a token not used by any production (repeatable)",
    )
    argparser.add_argument(
        "--right-recursive",
        action="store_true",
        help="desugar `*` and `+` into right recursive rules",
    )
    argparser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return argparser


def main(argv: Optional[Sequence[str]] = None) -> int:
    argparser = make_argument_parser()
    args = argparser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    if args.grammar not in EXAMPLES and not Path(args.grammar).is_file():
        argparser.error(f"no example grammar or file named {args.grammar!r}")

    grammar = load_grammar(args.grammar, args.tokens, args.right_recursive)
    logger.info("loaded %r", grammar)
    table = build(grammar)

    print_rich(escape(str(grammar)))
    print_rich(
        escape(
            table.to_pretty_table(grammar.rule_names, grammar.token_names).get_string()
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
