"""File reading/writing and output path derivation"""

import os
from pathlib import Path

from md2html.errors import FileAccessError, NotFoundError, PermissionDeniedError


MD_SUFFIX = '.md'
HTML_SUFFIX = '.html'


def file_exists(path: Path) -> bool:
    """Return True if path is an existing, readable regular file."""
    path = Path(path)
    return path.is_file() and os.access(path, os.R_OK)


def read_text(path: Path) -> str:
    """Read a UTF-8 file, mapping OS failures onto the md2html error types."""
    path = Path(path)
    try:
        return path.read_text(encoding='utf-8')
    except FileNotFoundError as e:
        raise NotFoundError(f"File not found: {path}", path) from e
    except PermissionError as e:
        raise PermissionDeniedError(f"Permission denied reading file: {path}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f'Failed to read file "{path}": {e}', path) from e


def write_text(path: Path, content: str) -> None:
    """Write content as UTF-8, creating parent directories as needed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    except PermissionError as e:
        raise PermissionDeniedError(f"Permission denied writing file: {path}", path) from e
    except OSError as e:
        raise FileAccessError(f'Failed to write file "{path}": {e}', path) from e


def derive_output_path(input_path: Path, output_dir: Path = None) -> Path:
    """Swap a trailing .md (any case) for .html, or append .html.

    output_dir relocates the derived file name without renaming it.
    """
    input_path = Path(input_path)
    name = input_path.name
    if name.lower().endswith(MD_SUFFIX):
        name = name[:-len(MD_SUFFIX)]
    html_name = f"{name}{HTML_SUFFIX}"
    if output_dir is not None:
        return Path(output_dir) / html_name
    return input_path.parent / html_name
