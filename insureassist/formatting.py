from __future__ import annotations

import html
import re

_H2 = re.compile(r"^## (.*)$", re.MULTILINE)
_H3 = re.compile(r"^### (.*)$", re.MULTILINE)
_STAR_BULLET = re.compile(r"^\* (.*)$", re.MULTILINE)
_DASH_BULLET = re.compile(r"^- (.*)$", re.MULTILINE)
_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")

H2_TEMPLATE = r'<h2 class="text-lg font-semibold mb-2 text-gray-800">\1</h2>'
H3_TEMPLATE = r'<h3 class="text-md font-semibold mb-2 text-gray-700">\1</h3>'
BULLET_TEMPLATE = r'<ul class="ml-4 mb-1">&bull; \1</ul>'
BOLD_TEMPLATE = r'<strong class="font-semibold">\1</strong>'
ITALIC_TEMPLATE = r'<em class="italic">\1</em>'


def format_markdown(text: str) -> str:
    """Render the small markdown subset the assistants ask for as HTML.

    Pattern based and lossy: headings (levels two and three), ``-``/``*``
    bullets, bold, italic and line breaks. Everything else passes through
    escaped.
    """
    if not text:
        return ""
    out = html.escape(text.replace("\r\n", "\n"), quote=False)
    out = _H2.sub(H2_TEMPLATE, out)
    out = _H3.sub(H3_TEMPLATE, out)
    out = _STAR_BULLET.sub(BULLET_TEMPLATE, out)
    out = _DASH_BULLET.sub(BULLET_TEMPLATE, out)
    out = _BOLD.sub(BOLD_TEMPLATE, out)
    out = _ITALIC.sub(ITALIC_TEMPLATE, out)
    out = out.replace("\n\n", "<br><br>")
    return out.replace("\n", "<br>")
