import json

import typer

from osvquery.commands.render import result_table
from osvquery.core.decorators import handle_errors
from osvquery.core.logging import console
from osvquery.models.reference import Reference
from osvquery.services.parser_service import parse


@handle_errors
def main(
    reference_type: str = typer.Argument(
        ...,
        help='Reference type, e.g. purl or http://spdx.org/rdf/references/cpe23Type',
    ),
    locator: str = typer.Argument(..., help='Reference locator'),
    maven_group: bool | None = typer.Option(
        None, '--maven-group/--no-maven-group',
        help='Qualify Maven package names with the group id (default: from config)',
    ),
    as_json: bool = typer.Option(
        False, '--json', help='Print the OSV query request body as JSON',
    ),
):
    """
    Parse a single external reference into an OSV query.
    """
    result = parse(
        Reference(reference_type=reference_type, reference_locator=locator),
        use_maven_group_in_pkg_name=maven_group,
    )

    if as_json:
        body = result.query.to_request() if result.query is not None else None
        typer.echo(json.dumps(body))
        return

    if not result.is_supported:
        console.print(f"[yellow]Unsupported reference type:[/] {reference_type}")
        return
    console.print(result_table(result))
