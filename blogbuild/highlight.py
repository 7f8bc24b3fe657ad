from __future__ import annotations

import html

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

DEFAULT_LANG = "text"


def highlight_code(code: str, lang: str) -> str:
    """Return ``code`` as HTML, token-highlighted when Pygments knows ``lang``."""
    try:
        lexer = get_lexer_by_name(lang)
    except ClassNotFound:
        return html.escape(code, quote=False)
    formatter = HtmlFormatter(nowrap=True)
    return highlight(code, lexer, formatter).rstrip("\n")


def format_code_block(source, language, class_name, options, md, **kwargs) -> str:
    """SuperFences formatter for every fenced block, nested ones included."""
    lang = language or DEFAULT_LANG
    body = highlight_code(source.rstrip("\n"), lang)
    return f'<div class="highlight"><code class="language-{html.escape(lang)}">{body}</code></div>'


CODE_FENCES = [
    {"name": "*", "class": "highlight", "format": format_code_block},
]
