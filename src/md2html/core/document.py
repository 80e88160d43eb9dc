"""Standalone HTML5 document wrapper"""

from pathlib import Path

from md2html.core.utils.escape import escape_html
from md2html.core.utils.fs import MD_SUFFIX


DEFAULT_TITLE = "Document"


def title_from_path(path: Path, default: str = DEFAULT_TITLE) -> str:
    """File name without a trailing .md (any case); default if nothing is left."""
    name = Path(path).name
    if name.lower().endswith(MD_SUFFIX):
        name = name[:-len(MD_SUFFIX)]
    return name or default


def wrap_html(fragment: str, title: str = DEFAULT_TITLE, lang: str = "en") -> str:
    """Return a minimal HTML5 document with fragment as the body."""
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{escape_html(lang)}">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"  <title>{escape_html(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{fragment}\n"
        "</body>\n"
        "</html>\n"
    )
