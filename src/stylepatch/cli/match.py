"""CLI command: stylepatch match -- rules applying to an element's classes."""

from __future__ import annotations


import click

from stylepatch.cascade import breadcrumb, create_selection, property_override, specificity
from stylepatch.cli.files import read_css
from stylepatch.parser import parse_css


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.argument("classes", nargs=-1, required=True)
@click.option("--property", "property_name", default=None, help="Report which rule wins for this property")
def match(cssfile: str, classes: tuple[str, ...], property_name: str | None) -> None:
    """Show the rules matching CLASSES in cascade order (lowest first)."""
    model = parse_css(read_css(cssfile))
    selection = create_selection(model, (c.lstrip(".") for c in classes))
    if selection is None or not selection.matched_rules:
        click.echo("No matching rules")
        return

    rules = list(selection.matched_rules)
    if property_name is None:
        for rule in rules:
            click.echo(f"  [{specificity(rule.selector):>4}] {breadcrumb(rule)}")
        return

    report = property_override(rules, property_name)
    if report.top_rule is None:
        click.echo(f"No matching rule declares {property_name}")
        return
    winner = report.top_rule.get_property(property_name)
    click.echo(f"{property_name}: {winner.value if winner else ''}  (from {report.top_rule.selector})")
    for rule in report.overriding_rules:
        prop = rule.get_property(property_name)
        click.echo(f"  overridden: {rule.selector} {prop.value if prop else ''}")
