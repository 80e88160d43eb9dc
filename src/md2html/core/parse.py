"""Markdown text to HTML fragment conversion"""

import logging

from md2html.core.extract.blocks import render_blocks, split_blocks
from md2html.core.extract.code_blocks import extract_code_blocks, restore_code_blocks
from md2html.errors import InvalidInputError


logger = logging.getLogger(__name__)


def normalize(text: str) -> str:
    """Unify line endings to \\n and neutralize NUL, which placeholders reserve."""
    return text.replace('\r\n', '\n').replace('\r', '\n').replace('\x00', '\ufffd')


def markdown_to_html_fragment(text: str) -> str:
    """Convert markdown text to an HTML fragment (no <html>/<body> wrapper).

    Raises InvalidInputError before doing anything if text is not a str.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected markdown text as str, got {type(text).__name__}")

    extracted = extract_code_blocks(normalize(text))
    blocks = split_blocks(extracted.text)
    logger.debug("Rendered %d block(s), %d code block(s)", len(blocks), len(extracted.blocks))
    return restore_code_blocks(render_blocks(blocks), extracted.blocks)


parse_markdown = markdown_to_html_fragment
