"""
Token type definitions and colours shared across all grammars.
Each token is represented as a dict:
  {
    "type"    : str   – token category,
    "value"   : str   – raw source text,
    "line"    : int   – 1-based line number,
    "column"  : int   – 1-based column number,
  }

Stretches of source that no rule claims come back as TEXT tokens.
"""

# ── Token types ────────────────────────────────────────────────────────────
KEYWORD        = "keyword"
STRING         = "string"
COMMENT        = "comment"
NUMBER         = "number"
FUNCTION       = "function"
TAG            = "tag"
ATTRIBUTE      = "attribute"
BRACKET        = "bracket"
OPERATOR       = "operator"
VARIABLE       = "variable"
PROPERTY       = "property"
PUNCTUATION    = "punctuation"
CLASS          = "class"
TEXT           = "text"             # unclaimed source, never wrapped

TOKEN_TYPES = frozenset({
    KEYWORD, STRING, COMMENT, NUMBER, FUNCTION, TAG, ATTRIBUTE, BRACKET,
    OPERATOR, VARIABLE, PROPERTY, PUNCTUATION, CLASS, TEXT,
})

# ── Presentation-only aliases (CSS / TypeScript) ───────────────────────────
SELECTOR       = "selector"
VALUE          = "value"
UNIT           = "unit"
TYPE           = "type"

# ── Colours ────────────────────────────────────────────────────────────────
TOKEN_COLORS = {
    KEYWORD:     "#8B5CF6",   # vivid purple
    STRING:      "#ea384c",   # red
    COMMENT:     "#6B7280",   # gray
    NUMBER:      "#F97316",   # bright orange
    FUNCTION:    "#1EAEDB",   # bright blue
    TAG:         "#D946EF",   # magenta pink
    ATTRIBUTE:   "#FEC6A1",   # soft orange
    SELECTOR:    "#D946EF",
    PROPERTY:    "#D946EF",
    VALUE:       "#1EAEDB",
    UNIT:        "#F97316",
    PUNCTUATION: "#D1D5DB",   # light gray
    OPERATOR:    "#FEF7CD",   # soft yellow
    TYPE:        "#F2FCE2",   # soft green
    CLASS:       "#F2FCE2",
    VARIABLE:    "#FDE1D3",   # soft peach
    BRACKET:     "#D1D5DB",
    TEXT:        "#ffffff",
}


def make_token(ttype: str, value: str, line: int, col: int) -> dict:
    return {"type": ttype, "value": value, "line": line, "column": col}
