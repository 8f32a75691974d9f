"""Sanitização de texto livre do formulário.

Escapa marcação para neutralizar injeção em qualquer template
downstream (o template do e-mail vive no provedor).
"""

from __future__ import annotations

from typing import Final

# Mesma tabela do `escape` usado por validadores JS de formulário
_HTML_ESCAPE_TABLE: Final[dict[int, str]] = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
        "\\": "&#x5C;",
        "`": "&#96;",
    }
)

# Seletores de variação não contam como caractere visível
_PRESENTATION_SELECTORS: Final = ("\ufe0e", "\ufe0f")


def escape_html(text: str) -> str:
    """Escapa caracteres de marcação HTML.

    Exemplos:
        >>> escape_html("<script>alert('x')</script>")
        '&lt;script&gt;alert(&#x27;x&#x27;)&lt;&#x2F;script&gt;'
    """
    return text.translate(_HTML_ESCAPE_TABLE)


def text_length(text: str) -> int:
    """Comprimento em caracteres visíveis (code points sem seletores de variação)."""
    return len(text) - sum(text.count(selector) for selector in _PRESENTATION_SELECTORS)
