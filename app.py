"""
app.py  –  Flask backend for the Syntax Highlighter

Endpoints
─────────
GET  /                    Serve the demo page (index.html)
POST /api/highlight       Highlight source code into inline-styled markup
POST /api/detect          Language auto-detection only
GET  /api/languages       Return list of supported languages
"""

from flask import Flask, request, jsonify, send_from_directory
from flask_cors import CORS
import os

from highlighter import LANGUAGES, LanguageDetector, render, tokenize
from highlighter.tokens import TEXT

# ── App Setup ──────────────────────────────────────────────────────────────
BASE_DIR   = os.path.dirname(os.path.abspath(__file__))
TMPL_DIR   = os.path.join(BASE_DIR, "templates")

MAX_CODE_LENGTH = int(os.environ.get("MAX_CODE_LENGTH", 100_000))

app = Flask(
    __name__,
    template_folder = TMPL_DIR,
)
CORS(app)   # Allow cross-origin requests (useful when frontend is on a CDN)

# ── Language registry ──────────────────────────────────────────────────────
LANGUAGE_ALIASES = {
    "htm":        "html",
    "javascript": "js",
    "typescript": "ts",
}

LANGUAGE_DISPLAY = {
    "html": {"label": "HTML"},
    "css":  {"label": "CSS"},
    "js":   {"label": "JavaScript"},
    "ts":   {"label": "TypeScript"},
    "json": {"label": "JSON"},
}


def _error(message: str, status: int, **extra):
    return jsonify({"error": message, **extra}), status


def _read_code(data: dict):
    """Pull "code" out of a request body; returns (code, error_response)."""
    if not isinstance(data, dict):
        return None, _error("Request body must be a JSON object", 400)
    code = data.get("code", "")
    if not isinstance(code, str):
        return None, _error("Field 'code' must be a string", 400)
    if not code.strip():
        return None, _error("No source code provided", 400)
    if len(code) > MAX_CODE_LENGTH:
        app.logger.warning("Rejected %d characters of code (limit %d)", len(code), MAX_CODE_LENGTH)
        return None, _error(f"Source code exceeds {MAX_CODE_LENGTH} characters", 413)
    return code, None


# ── Routes ──────────────────────────────────────────────────────────────────

@app.route("/")
def index():
    return send_from_directory(TMPL_DIR, "index.html")


@app.route("/api/languages", methods=["GET"])
def get_languages():
    """Return the list of supported languages."""
    return jsonify({
        "languages": [
            {
                "id": lang,
                **LANGUAGE_DISPLAY[lang],
                "aliases": sorted(a for a, target in LANGUAGE_ALIASES.items() if target == lang),
            }
            for lang in LANGUAGES
        ]
    })


@app.route("/api/detect", methods=["POST"])
def detect_language():
    """
    Body: { "code": "..." }
    Returns: { "detected_language": "...", "confidence": "...", "scores": {...} }
    """
    data = request.get_json(silent=True) or {}
    code, err = _read_code(data)
    if err:
        return err

    result = LanguageDetector.detect_and_explain(code)
    return jsonify(result)


@app.route("/api/highlight", methods=["POST"])
def highlight_code():
    """
    Body:
        {
          "code":     "<source code>",
          "language": "html" | "css" | "js" | "ts" | "json"   (optional – auto-detected if absent)
          "escape":   true | false                            (optional – default true)
        }

    Returns:
        {
          "language":   "html" | "css" | "js" | "ts" | "json" | <as given>,
          "confidence": "user-specified" | "high" | "medium" | "low",
          "html":       "<highlighted markup>",
          "tokens":     [ { type, value, line, column }, … ],
          "stats":      { total, by_type: { TYPE: count } }
        }

    A language that is given but not supported is not an error: the code
    comes back as a single unstyled text token.
    """
    data = request.get_json(silent=True) or {}
    code, err = _read_code(data)
    if err:
        return err

    language = data.get("language")
    if language is None:
        language = ""
    elif not isinstance(language, str):
        return _error("Field 'language' must be a string", 400)
    escape = data.get("escape", True)
    if not isinstance(escape, bool):
        return _error("Field 'escape' must be a boolean", 400)

    # Normalise alias
    language = language.lower().strip()
    language = LANGUAGE_ALIASES.get(language, language)

    # Auto-detect if not supplied
    confidence = "user-specified"
    if not language:
        language, confidence = LanguageDetector.detect(code)
        if language == LanguageDetector.UNKNOWN:
            app.logger.info("Language detection failed for %d characters of code", len(code))
            return _error(
                "Could not auto-detect the language. "
                "Please select HTML, CSS, JavaScript, TypeScript or JSON explicitly.",
                422,
                scores=LanguageDetector.detect_and_explain(code)["scores"],
            )

    tokens = tokenize(code, language)

    # ── Statistics ─────────────────────────────────────────────────────────
    by_type: dict[str, int] = {}
    for tok in tokens:
        if tok["type"] == TEXT:
            continue
        by_type[tok["type"]] = by_type.get(tok["type"], 0) + 1

    stats = {
        "total":   sum(by_type.values()),
        "by_type": by_type,
    }

    return jsonify({
        "language":   language,
        "confidence": confidence,
        "html":       render(tokens, escape=escape),
        "tokens":     tokens,
        "stats":      stats,
    })


# ── Error handlers ─────────────────────────────────────────────────────────

@app.errorhandler(404)
def not_found(e):
    return _error("Not found", 404)


@app.errorhandler(405)
def method_not_allowed(e):
    return _error("Method not allowed", 405)


# ── Dev-server entry-point ─────────────────────────────────────────────────
if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("FLASK_DEBUG", "true").lower() == "true"
    print(f"  Syntax Highlighter API  →  http://127.0.0.1:{port}")
    app.run(host="0.0.0.0", port=port, debug=debug)
