import click
from rich.console import Console
from rich.table import Table

from .config import get_settings
from .loading.loader import DatasetLoader
from .rdf.models import Literal
from .thing import get as accessors
from .thing.thing import get_thing_all, get_thing_one

console = Console()

VALUE_TYPES = {
    "iri": (accessors.get_iri_one, accessors.get_iri_all),
    "boolean": (accessors.get_boolean_one, accessors.get_boolean_all),
    "datetime": (accessors.get_datetime_one, accessors.get_datetime_all),
    "decimal": (accessors.get_decimal_one, accessors.get_decimal_all),
    "integer": (accessors.get_integer_one, accessors.get_integer_all),
    "string": (accessors.get_string_unlocalized_one, accessors.get_string_unlocalized_all),
    "named-node": (accessors.get_named_node_one, accessors.get_named_node_all),
    "literal": (accessors.get_literal_one, accessors.get_literal_all),
}

LOCALE_STRING = "locale-string"


def load_dataset(file_path: str, format: str | None):
    """Load a dataset file with the configured defaults"""
    settings = get_settings()
    loader = DatasetLoader(default_format=settings.reader.default_format)
    return loader.load_from_file(file_path, format=format)


def report_failure(message: str, error: Exception):
    console.print(f"✗ {message}: {error}", style="red")
    if get_settings().log_level == "DEBUG":
        console.print_exception()


@click.group()
def cli():
    """Solid Thing CLI - typed reads over RDF datasets"""
    pass


@cli.command()
@click.argument('file_path', type=click.Path(exists=True))
@click.argument('subject')
@click.argument('predicate')
@click.option(
    '--type', 'value_type',
    type=click.Choice(sorted([*VALUE_TYPES, LOCALE_STRING])),
    default='string',
    help='Value type to read'
)
@click.option('--locale', default=None, help='Locale for locale-string values')
@click.option('--all', 'read_all', is_flag=True, help='Read every value, not just the first')
@click.option('--format', default=None, help='RDF format (guessed from the file name by default)')
def get(
    file_path: str,
    subject: str,
    predicate: str,
    value_type: str,
    locale: str | None,
    read_all: bool,
    format: str | None
):
    """Read the value(s) of PREDICATE on SUBJECT"""
    try:
        thing = get_thing_one(load_dataset(file_path, format), subject)

        if value_type == LOCALE_STRING:
            locale = locale or get_settings().reader.default_locale
            if read_all:
                values = accessors.get_string_in_locale_all(thing, predicate, locale)
            else:
                values = [accessors.get_string_in_locale_one(thing, predicate, locale)]
        else:
            get_one, get_all = VALUE_TYPES[value_type]
            values = get_all(thing, predicate) if read_all else [get_one(thing, predicate)]

        values = [v for v in values if v is not None]
        if not values:
            console.print(f"No {value_type} value for <{predicate}>", style="yellow")
            return

        for value in values:
            console.print(str(value), style="cyan", markup=False, highlight=False)

    except Exception as e:
        report_failure("Read failed", e)


@cli.command()
@click.argument('file_path', type=click.Path(exists=True))
@click.argument('subject')
@click.option('--format', default=None, help='RDF format (guessed from the file name by default)')
def describe(file_path: str, subject: str, format: str | None):
    """Show every statement about SUBJECT"""
    try:
        thing = get_thing_one(load_dataset(file_path, format), subject)

        if len(thing) == 0:
            console.print(f"No statements about <{subject}>", style="yellow")
            return

        table = Table(title=f"<{subject}>")
        table.add_column("Predicate", style="cyan")
        table.add_column("Object")
        table.add_column("Datatype", style="green")
        table.add_column("Language", style="magenta")

        for quad in thing:
            term = quad.object
            if isinstance(term, Literal):
                table.add_row(quad.predicate.value, term.value, term.datatype.value, term.language)
            else:
                table.add_row(quad.predicate.value, str(term), "", "")

        console.print(table)

    except Exception as e:
        report_failure("Describe failed", e)


@cli.command()
@click.argument('file_path', type=click.Path(exists=True))
@click.option('--format', default=None, help='RDF format (guessed from the file name by default)')
def subjects(file_path: str, format: str | None):
    """List the subjects in a dataset"""
    try:
        things = get_thing_all(load_dataset(file_path, format))

        if not things:
            console.print("No statements found", style="yellow")
            return

        table = Table(title="Subjects")
        table.add_column("Subject", style="cyan")
        table.add_column("Statements", justify="right")

        for thing in things:
            table.add_row(str(thing[0].subject), str(len(thing)))

        console.print(table)

    except Exception as e:
        report_failure("Failed", e)


@cli.command()
def info():
    """Show effective configuration"""
    try:
        settings = get_settings()

        console.print("\n📊 Solid Thing Configuration\n", style="bold")
        console.print(f"  Log level: {settings.log_level}")
        console.print(f"  Default locale: {settings.reader.default_locale}")
        console.print(f"  Default format: {settings.reader.default_format}")
        console.print()

    except Exception as e:
        report_failure("Failed", e)


if __name__ == '__main__':
    cli()
