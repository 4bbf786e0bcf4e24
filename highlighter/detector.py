"""
Language Detector  –  heuristic-based scoring system.

Each language accumulates a score from pattern matches.
The language with the highest score wins.  A minimum threshold
ensures "unknown" is returned when no language matches well.

Languages supported: html, css, js, ts, json
"""

import json
import re


# ── Pattern sets ──────────────────────────────────────────────────────────

# Patterns that STRONGLY indicate a specific language
_HTML_STRONG = [
    r"<!DOCTYPE\s+html",
    r"<html\b",
    r"<(?:head|body|div|span|p|a|ul|li|section|script|style)\b[^<>]*>",
    r"</[a-zA-Z][a-zA-Z0-9]*\s*>",
    r"<!--",
    r"\s(?:class|id|href|src)=\"",
]

_CSS_STRONG = [
    r"^[ \t]*[.#]?[a-zA-Z][\w\-]*(?::{1,2}[\w\-]+)?[ \t]*\{",
    r"^[ \t]*[a-zA-Z-]+[ \t]*:[ \t]*[^;{}\n]+;[ \t]*$",
    r"@media\b",
    r"@import\s+url\(",
    r"@keyframes\b",
    r"\b\d+(?:px|rem|em|vh|vw)\b",
    r"!important\b",
]

_JS_STRONG = [
    r"\bfunction\s*\w*\s*\(",
    r"\b(?:const|let|var)\s+\w+\s*=",
    r"=>",
    r"\bconsole\.\w+\s*\(",
    r"\bdocument\.\w+",
    r"\brequire\s*\(",
    r"\bimport\s+.+\s+from\s+['\"]",
    r"\bexport\s+(?:default|const|function|class)\b",
    r"===|!==",
]

_TS_STRONG = [
    r"\binterface\s+[A-Z]\w*",
    r"\btype\s+[A-Z]\w*\s*=",
    r"\b(?:const|let|var)\s+\w+\s*:\s*\w+",
    r"\)\s*:\s*(?:string|number|boolean|void|Promise)\b",
    r"\b(?:public|private|protected|readonly)\s+\w+",
    r"\benum\s+[A-Z]\w*",
    r"<[A-Z]\w*>",
    r"\bas\s+(?:string|number|any|unknown|const)\b",
]

_JSON_STRONG = [
    r"^[ \t]*[{\[]",
    r"\"[^\"]+\"\s*:",
]

# Patterns that WEAKLY suggest a language (shared syntax elements)
_HTML_WEAK = [
    r"<[a-zA-Z]",
    r"/>",
]

_CSS_WEAK = [
    r"[{};]",
    r"\bcolor\s*:",
    r"#[0-9a-fA-F]{3,6}\b",
]

_JS_WEAK = [
    r"[{};]",
    r"\breturn\b",
    r"\bif\s*\(",
    r"\bfor\s*\(",
    r"//",
]

_TS_WEAK = [
    r":\s*(?:string|number|boolean|any)\b",
    r"\bimplements\b",
]

_JSON_WEAK = [
    r"\b(?:true|false|null)\b",
    r"[\]}]\s*$",
]


def _score(source: str, strong_patterns: list, weak_patterns: list) -> int:
    score = 0
    for p in strong_patterns:
        if re.search(p, source, re.MULTILINE):
            score += 3
    for p in weak_patterns:
        if re.search(p, source, re.MULTILINE):
            score += 1
    return score


def _parses_as_json(source: str) -> bool:
    try:
        value = json.loads(source)
    except ValueError:
        return False
    return isinstance(value, (dict, list))


def _all_scores(source: str) -> dict:
    scores = {
        "html": _score(source, _HTML_STRONG, _HTML_WEAK),
        "css":  _score(source, _CSS_STRONG,  _CSS_WEAK),
        "js":   _score(source, _JS_STRONG,   _JS_WEAK),
        "ts":   _score(source, _TS_STRONG,   _TS_WEAK),
        "json": _score(source, _JSON_STRONG, _JSON_WEAK),
    }

    # Valid JSON is almost never anything else.
    if _parses_as_json(source):
        scores["json"] += 10

    # TypeScript is a superset of JavaScript; any type annotation breaks the
    # tie toward TS, otherwise plain JS wins.
    if scores["ts"] >= 3:
        scores["ts"] += scores["js"]
    else:
        scores["ts"] = 0

    return scores


class LanguageDetector:
    """
    Detect whether source code is HTML, CSS, JavaScript, TypeScript or JSON.

    Usage:
        lang, confidence = LanguageDetector.detect(source_code)
        # lang ∈ {"html", "css", "js", "ts", "json", "unknown"}
        # confidence ∈ {"high", "medium", "low", "none"}
    """

    UNKNOWN   = "unknown"
    LANGUAGES = ("html", "css", "js", "ts", "json")

    @staticmethod
    def detect(source: str) -> tuple[str, str]:
        """
        Returns (language, confidence).
        confidence is one of: "high", "medium", "low", "none"
        """
        if not source or not source.strip():
            return LanguageDetector.UNKNOWN, "none"

        scores = _all_scores(source)

        best_lang  = max(scores, key=lambda k: scores[k])
        best_score = scores[best_lang]

        if best_score < 3:
            return LanguageDetector.UNKNOWN, "none"

        # Confidence based on score gap and absolute score
        second_best = sorted(scores.values(), reverse=True)[1]
        gap = best_score - second_best

        if best_score >= 9 and gap >= 3:
            confidence = "high"
        elif best_score >= 5 or gap >= 2:
            confidence = "medium"
        else:
            confidence = "low"

        return best_lang, confidence

    @staticmethod
    def detect_and_explain(source: str) -> dict:
        """
        Returns a detailed dict with language, confidence, and per-language scores.
        """
        lang, conf = LanguageDetector.detect(source)
        return {
            "detected_language": lang,
            "confidence":        conf,
            "scores":            _all_scores(source or ""),
        }
