import re

import pytest

from highlighter import GRAMMARS, LANGUAGES, TOKEN_COLORS, extend_grammar, lookup
from highlighter.grammars import JS_KEYWORDS, JS_RULES, TS_EXTRA_KEYWORDS, HighlightingRule
from highlighter.tokens import SELECTOR, TOKEN_TYPES, TYPE, UNIT, VALUE


def _names(rules) -> list:
    return [rule.name for rule in rules]


def test_supported_languages() -> None:
    assert LANGUAGES == ("html", "css", "js", "ts", "json")
    for language in LANGUAGES:
        assert lookup(language) is GRAMMARS[language]


@pytest.mark.parametrize("language", ["python", "", "HTML", "javascript", None, 3])
def test_lookup_unknown(language) -> None:
    assert lookup(language) is None


def test_comments_and_strings_come_first() -> None:
    assert _names(lookup("html")) == ["comment", "tag", "attribute", "string"]
    assert _names(lookup("css")) == ["comment", "selector", "property", "value", "unit", "string"]
    assert _names(lookup("js")) == [
        "comment", "string", "keyword", "function", "number", "operator", "punctuation",
    ]
    assert _names(lookup("json")) == ["key", "string", "number", "keyword", "punctuation"]


def test_typescript_extends_javascript() -> None:
    ts = lookup("ts")
    assert _names(ts) == [
        "comment", "string", "keyword", "type", "function", "number", "operator", "punctuation",
    ]
    js_by_name = {rule.name: rule for rule in lookup("js")}
    for rule in ts:
        if rule.name not in ("keyword", "type"):
            assert rule is js_by_name[rule.name]

    ts_keyword = ts[2].pattern
    js_keyword = js_by_name["keyword"].pattern
    for word in JS_KEYWORDS:
        assert ts_keyword.fullmatch(word)
    for word in TS_EXTRA_KEYWORDS:
        assert ts_keyword.fullmatch(word)
        assert not js_keyword.fullmatch(word)


def test_keywords_match_whole_words_only() -> None:
    keyword = lookup("js")[2].pattern
    assert keyword.findall("instance in index") == ["in"]


def test_every_emitted_type_has_a_color() -> None:
    presentation = {SELECTOR, VALUE, UNIT, TYPE}
    for language, rules in GRAMMARS.items():
        for rule in rules:
            assert rule.token_type in TOKEN_COLORS, (language, rule.name)
            assert rule.token_type in TOKEN_TYPES | presentation
    for color in TOKEN_COLORS.values():
        assert re.fullmatch(r"#[0-9A-Fa-f]{6}", color)


def test_extend_grammar_preserves_order() -> None:
    extra = HighlightingRule("regex", re.compile(r"/[^/\n]+/"), "string")
    comment = HighlightingRule("comment", re.compile(r"#.*"), "comment")

    derived = extend_grammar(JS_RULES, replace={"comment": comment}, insert_after={"string": (extra,)})

    assert _names(derived) == [
        "comment", "string", "regex", "keyword", "function", "number", "operator", "punctuation",
    ]
    assert derived[0] is comment
    assert JS_RULES[0] is not comment
    assert len(JS_RULES) == 7


def test_extend_grammar_rejects_unknown_names() -> None:
    with pytest.raises(KeyError):
        extend_grammar(JS_RULES, replace={"nope": JS_RULES[0]})
