import re

import pytest

from app import app as flask_app
from highlighter.tokens import TOKEN_COLORS

_WRAPPER = re.compile(r'<span class="[a-z]+" style="color:#[0-9A-Fa-f]{6}">|</span>')


def span(token_type: str, text: str) -> str:
    return f'<span class="{token_type}" style="color:{TOKEN_COLORS[token_type]}">{text}</span>'


def strip_markup(markup: str) -> str:
    return _WRAPPER.sub("", markup)


@pytest.fixture
def client():
    flask_app.config.update(TESTING=True)
    with flask_app.test_client() as client:
        yield client
