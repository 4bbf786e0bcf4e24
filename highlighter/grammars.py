"""
Grammar tables  –  one ordered rule list per language:
  • html   comments, tags, attributes, quoted strings
  • css    comments, selectors, properties, values, units, strings
  • js     comments, strings, keywords, calls, numbers, operators, punctuation
  • ts     the js table with extra keywords and an upper-case type rule
  • json   keys, strings, numbers, literals, punctuation

Order is significant.  The engine lets each rule claim only the text that
no earlier rule has claimed, so comments and strings always come first.
"""

import re
from collections import namedtuple

from .tokens import (
    KEYWORD, STRING, COMMENT, NUMBER, FUNCTION, TAG, ATTRIBUTE,
    OPERATOR, PROPERTY, PUNCTUATION, CLASS, SELECTOR, VALUE,
)

HighlightingRule = namedtuple("HighlightingRule", ["name", "pattern", "token_type"])


def _rule(name: str, pattern: str, token_type: str = None, flags: int = 0) -> HighlightingRule:
    return HighlightingRule(name, re.compile(pattern, flags), token_type or name)


def _word_list(words) -> str:
    return r"\b(?:" + "|".join(words) + r")\b"


def extend_grammar(base, replace=None, insert_after=None) -> tuple:
    """
    Build a derived table from *base*.

    replace       {rule name: rule}          swap a rule in place
    insert_after  {rule name: (rule, ...)}   add rules right after a named one

    Untouched rules keep their relative order.
    """
    replace = replace or {}
    insert_after = insert_after or {}

    known = {rule.name for rule in base}
    unknown = (set(replace) | set(insert_after)) - known
    if unknown:
        raise KeyError(f"No rule named {', '.join(sorted(unknown))} in base grammar")

    rules = []
    for rule in base:
        rules.append(replace.get(rule.name, rule))
        rules.extend(insert_after.get(rule.name, ()))
    return tuple(rules)


# ── HTML ───────────────────────────────────────────────────────────────────
_QUOTED = r"\"[^\"]*\"|'[^']*'"

HTML_RULES = (
    _rule("comment",   r"<!--.*?(?:-->|\Z)", COMMENT, re.DOTALL),
    _rule("tag",       r"</?[a-zA-Z][a-zA-Z0-9]*|>", TAG),
    _rule("attribute", r"\s[a-zA-Z][a-zA-Z0-9-]*=", ATTRIBUTE),
    _rule("string",    _QUOTED, STRING),
)

# ── CSS ────────────────────────────────────────────────────────────────────
CSS_UNITS = ("%", "px", "em", "rem", "vh", "vw", "pt", "ex", "cm", "mm", "in")

CSS_RULES = (
    _rule("comment",  r"/\*.*?(?:\*/|\Z)", COMMENT, re.DOTALL),
    _rule("selector", r"(?<![a-zA-Z0-9_.\-#:])[a-zA-Z0-9_.\-#:]+\s*\{", SELECTOR),
    _rule("property", r"(?<![a-zA-Z-])[a-zA-Z-]+\s*:", PROPERTY),
    # the colon is usually already claimed by "property"; look behind for it
    _rule("value",    r"(?::|(?<=:))[^;}]+", VALUE),
    _rule("unit",     r"\b\d+(?:" + "|".join(CSS_UNITS) + r")(?!\w)", NUMBER),
    _rule("string",   _QUOTED, STRING),
)

# ── JavaScript ─────────────────────────────────────────────────────────────
JS_KEYWORDS = (
    "async", "await", "break", "case", "catch", "class", "const", "continue",
    "debugger", "default", "delete", "do", "else", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with", "yield", "let",
)

JS_RULES = (
    _rule("comment",     r"//[^\n]*|/\*.*?(?:\*/|\Z)", COMMENT, re.DOTALL),
    _rule("string",      r"\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'|`(?:[^`\\]|\\.)*`", STRING),
    _rule("keyword",     _word_list(JS_KEYWORDS), KEYWORD),
    _rule("function",    r"\b[a-zA-Z_$][a-zA-Z0-9_$]*(?=\s*\()", FUNCTION),
    _rule("number",      r"\b\d+(?:\.\d+)?\b", NUMBER),
    _rule("operator",    r"[+\-*/%=<>!&|^~?:]+", OPERATOR),
    _rule("punctuation", r"[{}\[\]();,.]", PUNCTUATION),
)

# ── TypeScript ─────────────────────────────────────────────────────────────
TS_EXTRA_KEYWORDS = (
    "interface", "type", "namespace", "enum", "as", "implements",
    "readonly", "private", "protected", "public", "static",
)

TS_KEYWORDS = JS_KEYWORDS + TS_EXTRA_KEYWORDS

TS_RULES = extend_grammar(
    JS_RULES,
    replace={"keyword": _rule("keyword", _word_list(TS_KEYWORDS), KEYWORD)},
    insert_after={"keyword": (_rule("type", r"\b[A-Z][a-zA-Z0-9_$]*\b", CLASS),)},
)

# ── JSON ───────────────────────────────────────────────────────────────────
JSON_RULES = (
    _rule("key",         r"\"[^\"]+\"(?=\s*:)", PROPERTY),
    _rule("string",      r"\"(?:[^\"\\]|\\.)*\"", STRING),
    _rule("number",      r"-?\b\d+(?:\.\d+)?\b", NUMBER),
    _rule("keyword",     _word_list(("true", "false", "null")), KEYWORD),
    _rule("punctuation", r"[{}\[\]:,]", PUNCTUATION),
)

# ── Registry ───────────────────────────────────────────────────────────────
GRAMMARS = {
    "html": HTML_RULES,
    "css":  CSS_RULES,
    "js":   JS_RULES,
    "ts":   TS_RULES,
    "json": JSON_RULES,
}

LANGUAGES = tuple(GRAMMARS)


def lookup(language):
    """Return the ordered rules for *language*, or None if unsupported."""
    if not isinstance(language, str):
        return None
    return GRAMMARS.get(language)
