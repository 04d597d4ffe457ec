from .cfg import IndexedGrammar
from .core import GrammarView, NonTerminal, Production, Symbol, Terminal

__all__ = [
    "GrammarView",
    "IndexedGrammar",
    "NonTerminal",
    "Production",
    "Symbol",
    "Terminal",
]
