"""Inline rewrites for heading and paragraph text.

Order is fixed: code spans, links, then the remaining text is escaped, then
bold, then italic. Code spans and anchors are parked behind placeholder tokens
as soon as they are rendered, so the emphasis passes never see their content
or the href attribute.
"""

import re
from typing import Optional

from md2html.core.utils.escape import escape_html
from md2html.core.utils.placeholders import PlaceholderTable


INLINE_KIND = 'INLINE'

CODE_SPAN_RE = re.compile(r'`([^`]+)`')
LINK_RE = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')

# Triple markers nest <em> inside <strong> so the tags never cross.
BOLD_ITALIC_RES = (
    re.compile(r'\*\*\*(.+?)\*\*\*'),
    re.compile(r'___(.+?)___'),
)
BOLD_RES = (
    re.compile(r'\*\*(.+?)\*\*'),
    re.compile(r'__(.+?)__'),
)
# A lone marker only; never half of a doubled one left over from the bold pass.
ITALIC_RES = (
    re.compile(r'(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)'),
    re.compile(r'(?<!_)_(?!_)(.+?)(?<!_)_(?!_)'),
)


def _park(html: str, table: Optional[PlaceholderTable], source: str = None) -> str:
    return table.add(html, source) if table is not None else html


def transform_inline_code(text: str, table: PlaceholderTable = None) -> str:
    """`code` -> <code>code</code>, with the content escaped."""
    return CODE_SPAN_RE.sub(
        lambda m: _park(f'<code>{escape_html(m.group(1))}</code>', table, m.group(0)), text
    )


def transform_bold(text: str) -> str:
    """**text** and __text__ -> <strong>; the first closing pair ends the span.

    ***text*** and ___text___ become <strong><em>text</em></strong>.
    """
    for pattern in BOLD_ITALIC_RES:
        text = pattern.sub(r'<strong><em>\1</em></strong>', text)
    for pattern in BOLD_RES:
        text = pattern.sub(r'<strong>\1</strong>', text)
    return text


def transform_italic(text: str) -> str:
    """*text* and _text_ -> <em>. Run after transform_bold."""
    for pattern in ITALIC_RES:
        text = pattern.sub(r'<em>\1</em>', text)
    return text


def transform_emphasis(text: str) -> str:
    return transform_italic(transform_bold(text))


def transform_links(text: str, table: PlaceholderTable = None) -> str:
    """[text](url) -> <a href="url">text</a>.

    The label gets bold/italic only; nested links and code spans are not
    re-parsed. Code spans parked inside the label are restored as HTML; inside
    the URL they are put back as their backtick source and escaped.
    """
    def render(m: re.Match) -> str:
        label = transform_emphasis(escape_html(m.group(1)))
        url = m.group(2)
        if table is not None:
            label = table.restore(label)
            url = table.restore(url, source=True)
        return _park(f'<a href="{escape_html(url)}">{label}</a>', table, m.group(0))

    return LINK_RE.sub(render, text)


def transform_inline(text: str) -> str:
    """Apply every inline rewrite to one block's text, escaping user text exactly once."""
    table = PlaceholderTable(INLINE_KIND)
    text = transform_inline_code(text, table)
    text = transform_links(text, table)
    text = transform_emphasis(escape_html(text))
    return table.restore(text)
