"""Intermediate data models for the conversion pipeline"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class BlockType(str, Enum):
    heading = "heading"
    paragraph = "paragraph"
    placeholder = "placeholder"


class Block(BaseModel):
    """A single rendered block-level element of the output fragment."""
    type: BlockType
    html: str
    level: Optional[int] = Field(default=None, ge=1, le=6)   # heading level; None for non-headings


@dataclass
class ExtractedText:
    """Source text with fenced code blocks swapped out for placeholder tokens."""
    text:   str
    blocks: list[str]          # rendered <pre><code> HTML, indexed by placeholder


@dataclass(frozen=True)
class ConversionResult:
    """Resolved paths of one completed file conversion."""
    input_path:  Path
    output_path: Path
