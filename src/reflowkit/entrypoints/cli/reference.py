"""``reflowkit subdivisions`` — list the bundled country subdivisions."""

import click

from reflowkit.international.subdivisions import COUNTRY_SUBDIVISIONS

from .helpers import warn


@click.command("subdivisions")
@click.option("--country", "-c", help="Two-letter country code, e.g. US.")
@click.option("--category", help="Category such as 'state' or 'outlying territory'.")
def subdivisions(country: str | None, category: str | None) -> None:
    """Print subdivisions as tab-separated CODE, NAME, CATEGORY lines."""
    rows = COUNTRY_SUBDIVISIONS.by_country(country) if country else list(COUNTRY_SUBDIVISIONS)
    if category:
        in_category = set(COUNTRY_SUBDIVISIONS.by_category(category))
        rows = [s for s in rows if s in in_category]

    if not rows:
        warn("No subdivisions match the given filters.")
        return

    for subdivision in rows:
        click.echo(f"{subdivision.code}\t{subdivision.name}\t{subdivision.category}")
