from md2html.cli.cli import app

__all__ = ["app"]
