"""Conversion step: read markdown, render, wrap, and write the HTML document"""

import logging
from pathlib import Path

from md2html.config import Settings
from md2html.core.document import title_from_path, wrap_html
from md2html.core.models import ConversionResult
from md2html.core.parse import markdown_to_html_fragment
from md2html.core.utils.fs import derive_output_path, read_text, write_text


logger = logging.getLogger(__name__)


def resolve_output_path(input_path: Path, output_path: Path = None, settings: Settings = None) -> Path:
    """Explicit output path wins; otherwise derive one, honoring settings.output_dir."""
    if output_path is not None:
        return Path(output_path)
    output_dir = settings.output_dir if settings else None
    return derive_output_path(input_path, Path(output_dir) if output_dir else None)


def convert(input_path: Path, output_path: Path = None, settings: Settings = None) -> ConversionResult:
    """Convert one markdown file into a standalone HTML document on disk.

    Raises the FileAccessError family on read or write failure; nothing is
    written if reading fails.
    """
    settings = settings or Settings()
    input_path = Path(input_path)
    output_path = resolve_output_path(input_path, output_path, settings)

    markdown = read_text(input_path)
    fragment = markdown_to_html_fragment(markdown)
    title = title_from_path(input_path, settings.default_title)
    write_text(output_path, wrap_html(fragment, title, settings.lang))

    logger.debug("Converted %s -> %s (%d chars)", input_path, output_path, len(fragment))
    return ConversionResult(input_path=input_path, output_path=output_path)
