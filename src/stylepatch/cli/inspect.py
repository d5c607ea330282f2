"""CLI commands: stylepatch inspect / tokens -- display CSS structure."""

from __future__ import annotations

from pathlib import Path

import click

from stylepatch.model import Layer
from stylepatch.cli.files import read_css
from stylepatch.parser import find_tokens, parse_css


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(cssfile: str) -> None:
    """Parse a CSS file and display its structure.

    Shows token and rule counts, rules per layer, and scopes.
    """
    model = parse_css(read_css(cssfile))

    click.echo(f"File:   {Path(cssfile).name}")
    click.echo(f"Tokens: {len(model.tokens)}")
    click.echo(f"Rules:  {len(model.rules)}")
    click.echo()

    click.echo("Layers:")
    for layer in Layer:
        layer_tokens = len(model.tokens_in_layer(layer))
        parts = [f"  {layer.value:<11} {len(model.layer(layer))} rule(s)"]
        if layer_tokens:
            parts.append(f"{layer_tokens} token(s)")
        click.echo("  ".join(parts))
    click.echo()

    click.echo("Scopes:")
    for name, bucket in model.scopes.items():
        click.echo(f"  {name:<11} {len(bucket.tokens)} token(s)  {len(bucket.rules)} rule(s)")


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--query", "-q", default=None, help="Only tokens whose name, value or scope contains this")
def tokens(cssfile: str, query: str | None) -> None:
    """List the design tokens declared in a CSS file."""
    model = parse_css(read_css(cssfile))
    found = find_tokens(model, query) if query else list(model.tokens)
    for token in found:
        click.echo(f"{token.name}: {token.value}  scope={token.scope}  layer={token.layer.value}")
    if not found:
        click.echo("No tokens found")
