from dataclasses import dataclass
from pathlib import Path

import structlog
import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from osvquery.commands.render import describe_query
from osvquery.core.decorators import handle_errors
from osvquery.core.errors import ReferenceParseError
from osvquery.core.logging import console
from osvquery.services.parser_service import parse_external_ref
from osvquery.services.reference_loader import load_external_refs

logger = structlog.get_logger('refs_command')


@dataclass
class RefsSummary:
    total: int = 0
    parsed: int = 0
    skipped: int = 0
    failed: int = 0


def print_summary(summary: RefsSummary):
    table = Table(title='Reference Summary')
    table.add_column('Metric', style='cyan')
    table.add_column('Value', style='magenta')
    table.add_row('Total References', str(summary.total))
    table.add_row('Parsed', str(summary.parsed))
    table.add_row('Unsupported Type', str(summary.skipped))
    table.add_row('Invalid', str(summary.failed))
    console.print(table)


@handle_errors
def main(
    file_path: Path = typer.Argument(
        ...,
        help='JSON array or JSONL file of SPDX externalRefs entries',
    ),
    maven_group: bool | None = typer.Option(
        None, '--maven-group/--no-maven-group',
        help='Qualify Maven package names with the group id (default: from config)',
    ),
):
    """
    Parse every external reference in a file and show the resulting queries.

    Invalid locators are reported per row; the exit code is 1 if any failed.
    """
    entries = load_external_refs(file_path)
    summary = RefsSummary(total=len(entries))

    table = Table(title=f'References in {file_path.name}')
    table.add_column('Type', style='cyan')
    table.add_column('Locator', style='dim')
    table.add_column('Status')
    table.add_column('Query')
    table.add_column('Ecosystem')
    table.add_column('Name / Commit', style='magenta')
    table.add_column('Version')

    for entry in entries:
        reference_type = str(entry.get('referenceType', ''))
        locator = str(entry.get('referenceLocator', ''))
        try:
            result = parse_external_ref(entry, use_maven_group_in_pkg_name=maven_group)
        except (ReferenceParseError, ValidationError) as e:
            summary.failed += 1
            logger.debug('Reference rejected', locator=locator, error=str(e))
            table.add_row(
                escape(reference_type), escape(locator),
                '[red]Invalid[/red]', escape(str(e)), '', '', '',
            )
            continue

        if not result.is_supported:
            summary.skipped += 1
            table.add_row(escape(reference_type), escape(locator), '[dim]Skip[/dim]', '-', '-', '-', '-')
            continue

        summary.parsed += 1
        table.add_row(
            escape(reference_type), escape(locator), '[green]OK[/green]',
            *(escape(value) for value in describe_query(result)),
        )

    console.print(table)
    print_summary(summary)

    if summary.failed:
        raise typer.Exit(1)
