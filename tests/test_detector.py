import time

import pytest

from highlighter import LanguageDetector


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ('{"name": "Ann", "age": 3}', "json"),
        ('<div class="box"><p>Hi</p></div>', "html"),
        (".box {\n  color: red;\n  width: 10px;\n}", "css"),
        ("const add = (a, b) => a + b;\nconsole.log(add(1, 2));", "js"),
        ('interface User {\n  name: string;\n}\nconst u: User = { name: "a" };', "ts"),
    ],
)
def test_detect(code: str, expected: str) -> None:
    language, confidence = LanguageDetector.detect(code)
    assert language == expected
    assert confidence in ("high", "medium", "low")


@pytest.mark.parametrize("code", ["", "   \n", "hello world"])
def test_detect_unknown(code: str) -> None:
    assert LanguageDetector.detect(code) == (LanguageDetector.UNKNOWN, "none")


def test_detect_and_explain() -> None:
    result = LanguageDetector.detect_and_explain("[1, 2, 3]")
    assert result["detected_language"] == "json"
    assert set(result["scores"]) == set(LanguageDetector.LANGUAGES)
    assert result["scores"]["json"] > result["scores"]["js"]


@pytest.mark.parametrize("code", ["a: b\n" * 20_000, "<div " * 20_000, " \n" * 50_000 + "x"])
def test_detect_large_input(code: str) -> None:
    started = time.perf_counter()
    LanguageDetector.detect(code)
    assert time.perf_counter() - started < 5.0
