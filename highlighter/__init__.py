from .engine import highlight, render, tokenize
from .grammars import GRAMMARS, LANGUAGES, extend_grammar, lookup
from .detector import LanguageDetector
from .tokens import TOKEN_COLORS

__all__ = ["highlight", "render", "tokenize", "GRAMMARS", "LANGUAGES",
           "extend_grammar", "lookup", "LanguageDetector", "TOKEN_COLORS"]
