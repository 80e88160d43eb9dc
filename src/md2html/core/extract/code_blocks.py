"""Fenced code block extraction and restoration"""

import re

from md2html.core.models import ExtractedText
from md2html.core.utils.escape import escape_html
from md2html.core.utils.placeholders import PlaceholderTable


CODE_BLOCK_KIND = 'CODEBLOCK'

# Both fences must open a line; the first closing fence ends the block.
FENCE_RE = re.compile(r'^```([A-Za-z0-9-]*)\n(.*?)^```', re.MULTILINE | re.DOTALL)


def render_code_block(code: str, lang: str = '') -> str:
    """Render raw code as <pre><code>, dropping one trailing newline."""
    if code.endswith('\n'):
        code = code[:-1]
    attr = f' class="language-{escape_html(lang)}"' if lang else ''
    return f'<pre><code{attr}>{escape_html(code)}</code></pre>'


def extract_code_blocks(text: str) -> ExtractedText:
    """Replace each fenced block with a placeholder, left to right.

    Unterminated fences do not match and stay in the text as literal lines.
    """
    table = PlaceholderTable(CODE_BLOCK_KIND)
    replaced = FENCE_RE.sub(lambda m: table.add(render_code_block(m.group(2), m.group(1))), text)
    return ExtractedText(text=replaced, blocks=table.items)


def code_block_table(blocks: list[str]) -> PlaceholderTable:
    """Rebuild the placeholder table for an already extracted block list."""
    table = PlaceholderTable(CODE_BLOCK_KIND)
    table.items = list(blocks)
    table.sources = list(blocks)
    return table


def restore_code_blocks(text: str, blocks: list[str]) -> str:
    """Put the rendered code blocks back in place of their placeholders."""
    return code_block_table(blocks).restore(text)
