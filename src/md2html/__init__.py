"""md2html: convert a small subset of Markdown into standalone HTML documents"""

__version__ = "1.0.0"
