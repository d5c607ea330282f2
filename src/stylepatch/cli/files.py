"""Reading CSS files for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click


def read_css(cssfile: str) -> str:
    """Return the file's text, or exit with code 1 if it is not UTF-8."""
    try:
        return Path(cssfile).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        click.echo(f"Cannot read {cssfile}: {exc}", err=True)
        sys.exit(1)
