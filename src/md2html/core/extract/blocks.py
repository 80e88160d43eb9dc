"""Line-based splitting of placeholder text into headings, paragraphs, and code tokens"""

import re
from typing import Callable

from md2html.core.extract.code_blocks import code_block_table
from md2html.core.inline import transform_inline
from md2html.core.models import Block, BlockType


# 1-6 hashes, whitespace, then something to say. Seven hashes is paragraph text.
HEADING_RE = re.compile(r'^(#{1,6})\s+(\S.*?)\s*$')


def split_blocks(text: str, inline: Callable[[str], str] = transform_inline) -> list[Block]:
    """Classify each line and render the resulting blocks in order.

    Headings and placeholder lines flush any pending paragraph; blank lines end
    it silently. Paragraph lines are joined with single spaces before the
    inline rewrites run.
    """
    tokens = code_block_table([])
    blocks: list[Block] = []
    paragraph: list[str] = []

    def _flush() -> None:
        content = ' '.join(paragraph).strip()
        paragraph.clear()
        if content:
            blocks.append(Block(type=BlockType.paragraph, html=f'<p>{inline(content)}</p>'))

    for line in text.split('\n'):
        if m := HEADING_RE.match(line):
            _flush()
            level = len(m.group(1))
            blocks.append(Block(
                type=BlockType.heading,
                html=f'<h{level}>{inline(m.group(2))}</h{level}>',
                level=level,
            ))
        elif tokens.is_token(line):
            _flush()
            blocks.append(Block(type=BlockType.placeholder, html=line.strip()))
        elif not line.strip():
            _flush()
        else:
            paragraph.append(line)
    _flush()

    return blocks


def render_blocks(blocks: list[Block]) -> str:
    return '\n'.join(b.html for b in blocks)
