"""
Highlight engine  –  turns (code, language) into inline-styled markup.

Rules run in grammar order.  Each rule only searches the stretches of the
source that are still unclaimed, and every match claims its span for the
rule's token type.  Markup is produced once at the end, so no rule ever
sees the wrapper tags inserted for an earlier one.
"""

import html

from .grammars import lookup
from .tokens import TEXT, TOKEN_COLORS, make_token


def _claim(code: str, rules) -> list:
    """Return [(start, end, token_type | None), …] covering all of *code*."""
    spans = [(0, len(code), None)]
    for rule in rules:
        result = []
        for start, end, ttype in spans:
            if ttype is not None:
                result.append((start, end, ttype))
                continue
            pos = start
            # pos/endpos keep look-behind on the real source while stopping
            # look-ahead at the next claimed span
            for m in rule.pattern.finditer(code, start, end):
                if m.start() == m.end():
                    continue
                if m.start() > pos:
                    result.append((pos, m.start(), None))
                result.append((m.start(), m.end(), rule.token_type))
                pos = m.end()
            if pos < end:
                result.append((pos, end, None))
        spans = result
    return spans


def tokenize(code: str, language: str) -> list:
    """
    Split *code* into tokens for *language*.

    The token values concatenate back to *code*.  Unsupported languages give a
    single TEXT token; empty input gives an empty list.
    """
    if not code:
        return []

    rules = lookup(language)
    spans = _claim(code, rules) if rules is not None else [(0, len(code), None)]

    tokens = []
    line, line_start = 1, 0
    for start, end, ttype in spans:
        value = code[start:end]
        tokens.append(make_token(ttype or TEXT, value, line, start - line_start + 1))
        newlines = value.count("\n")
        if newlines:
            line += newlines
            line_start = start + value.rfind("\n") + 1
    return tokens


def wrap(token_type: str, text: str) -> str:
    return f'<span class="{token_type}" style="color:{TOKEN_COLORS[token_type]}">{text}</span>'


def render(tokens, escape: bool = False) -> str:
    """Join *tokens* into markup; TEXT tokens are emitted without a wrapper."""
    parts = []
    for tok in tokens:
        text = html.escape(tok["value"]) if escape else tok["value"]
        parts.append(text if tok["type"] == TEXT else wrap(tok["type"], text))
    return "".join(parts)


def highlight(code: str, language: str, escape: bool = False) -> str:
    """
    Return *code* with every recognised span wrapped in a coloured <span>.

    An unsupported *language* returns *code* unchanged.  The source text is not
    HTML-escaped unless *escape* is set.
    """
    if lookup(language) is None:
        return html.escape(code) if escape else code
    return render(tokenize(code, language), escape=escape)
