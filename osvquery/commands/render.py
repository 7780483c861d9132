from rich.markup import escape
from rich.table import Table

from osvquery.models.result import ParseResult


def describe_query(result: ParseResult) -> tuple[str, str, str, str]:
    """Return (kind, ecosystem, name or commit, version) for table display."""
    query = result.query
    if query is None:
        return ('-', '-', '-', '-')
    if query.is_commit_query:
        return ('commit', '-', query.commit, '-')
    return (
        'package',
        query.package.ecosystem,
        query.package.name,
        query.version or '-',
    )


def result_table(result: ParseResult) -> Table:
    table = Table(title='Parsed Reference')
    table.add_column('Field', style='cyan')
    table.add_column('Value', style='magenta')

    table.add_row('Reference Type', escape(result.reference.reference_type))
    table.add_row('Locator', escape(result.reference.reference_locator))
    kind, ecosystem, target, version = describe_query(result)
    table.add_row('Query', kind)
    if result.query is not None and result.query.is_package_query:
        table.add_row('Ecosystem', ecosystem)
        table.add_row('Name', escape(target))
        table.add_row('Version', escape(version))
        table.add_row('Purl', escape(result.query.package.purl or '-'))
    elif result.query is not None:
        table.add_row('Commit', target)

    if result.cpe_attributes is not None:
        for field_name, value in result.cpe_attributes.model_dump().items():
            table.add_row(
                f"CPE {field_name.replace('_', ' ')}",
                '-' if value is None else escape(str(value)),
            )
    return table
