"""CLI commands: stylepatch set-token / set-property -- apply one edit."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylepatch.cli.files import read_css
from stylepatch.document import Document
from stylepatch.patch import PatchError
from stylepatch.session import EditorSession


def _open_session(cssfile: str) -> EditorSession:
    return EditorSession(Document(read_css(cssfile)))


def _write(session: EditorSession, output: str | None) -> None:
    if output:
        Path(output).write_text(session.text, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(session.text, nl=False)


@click.command("set-token")
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.argument("name")
@click.argument("value")
@click.option("--scope", default=None, help="Scope of the token, e.g. .dark")
@click.option("--output", "-o", default=None, help="Write the result here instead of stdout")
def set_token(cssfile: str, name: str, value: str, scope: str | None, output: str | None) -> None:
    """Change the value of token NAME, leaving every other byte untouched."""
    session = _open_session(cssfile)
    if not name.startswith("--"):
        name = "--" + name
    try:
        change = session.edit_token(name, value, scope=scope)
    except KeyError as exc:
        click.echo(f"Edit failed: {exc.args[0]}", err=True)
        sys.exit(1)
    except PatchError as exc:
        click.echo(f"Edit failed: {exc}", err=True)
        sys.exit(1)
    click.echo(str(change), err=True)
    _write(session, output)


@click.command("set-property")
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.argument("selector")
@click.argument("property_name")
@click.argument("value")
@click.option("--output", "-o", default=None, help="Write the result here instead of stdout")
def set_property(
    cssfile: str, selector: str, property_name: str, value: str, output: str | None
) -> None:
    """Change PROPERTY_NAME inside the rule SELECTOR."""
    session = _open_session(cssfile)
    try:
        change = session.edit_property(selector, property_name, value)
    except KeyError as exc:
        click.echo(f"Edit failed: {exc.args[0]}", err=True)
        sys.exit(1)
    except PatchError as exc:
        click.echo(f"Edit failed: {exc}", err=True)
        sys.exit(1)
    click.echo(str(change), err=True)
    _write(session, output)
