"""
Command-line interface for PDF extract.
"""

import json
import logging
import os
import sys

import click
from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from pdf_extract import __version__
from pdf_extract.config import ExtractOptions
from pdf_extract.exceptions import PDFExtractException
from pdf_extract.utils import extract_sync, format_file_size, get_pdf_info, validate_pdf

console = Console()
err_console = Console(stderr=True)


def _fail(message):
    err_console.print(f"\n[bold red]✗ Error:[/bold red] {message}")
    sys.exit(1)


def range_options(func):
    """Options shared by every command that extracts pages."""
    func = click.option(
        '--password',
        default=None,
        help='Password for encrypted PDFs',
        type=str
    )(func)
    func = click.option(
        '--disable-combine-text-items',
        is_flag=True,
        help='Keep text items separate instead of combining them'
    )(func)
    func = click.option(
        '--normalize-whitespace',
        is_flag=True,
        help='Replace every whitespace character with a plain space'
    )(func)
    func = click.option(
        '--last-page', '-l',
        default=None,
        help='Last page to extract (defaults to the last page)',
        type=int
    )(func)
    func = click.option(
        '--first-page', '-f',
        default=1,
        show_default=True,
        help='First page to extract (1-indexed)',
        type=click.IntRange(min=1)
    )(func)
    return func


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    PDF Extract CLI - Extract page text with inline hyperlinks.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="extract")
@click.argument('input_pdf', type=click.Path(exists=True))
@range_options
@click.option(
    '--max-concurrency',
    default=None,
    help='Maximum number of pages extracted at once',
    type=click.IntRange(min=1)
)
@click.option(
    '--cancel-on-failure',
    is_flag=True,
    help='Cancel remaining pages as soon as one page fails'
)
@click.option(
    '--output', '-o',
    default=None,
    help='Write JSON to this file instead of stdout',
    type=click.Path(dir_okay=False)
)
@click.option('--pretty', is_flag=True, help='Indent JSON output')
def extract(input_pdf, first_page, last_page, normalize_whitespace,
            disable_combine_text_items, password, max_concurrency,
            cancel_on_failure, output, pretty):
    """
    Extract a PDF into a JSON document.

    Examples:

        pdf-extract extract input.pdf

        pdf-extract extract input.pdf -f 2 -l 5 -o result.json --pretty
    """
    try:
        options = ExtractOptions(
            first_page=first_page,
            last_page=last_page,
            normalize_whitespace=normalize_whitespace,
            disable_combine_text_items=disable_combine_text_items,
            password=password,
            max_concurrency=max_concurrency,
            join="cancel-on-failure" if cancel_on_failure else "first-failure",
        )
        result = extract_sync(input_pdf, options)
    except PDFExtractException as e:
        _fail(e)

    payload = json.dumps(result.to_dict(), indent=2 if pretty else None, ensure_ascii=False)

    if output:
        with open(output, 'w', encoding='utf-8') as handle:
            handle.write(payload)
            handle.write('\n')
        err_console.print(
            f"[bold green]✓ Extracted {len(result.pages)} pages[/bold green] "
            f"[dim]-> {os.path.abspath(output)}[/dim]"
        )
    else:
        click.echo(payload)


@cli.command(name="text")
@click.argument('input_pdf', type=click.Path(exists=True))
@range_options
def show_text(input_pdf, first_page, last_page, normalize_whitespace,
              disable_combine_text_items, password):
    """
    Print the fused content of each page.

    Example:

        pdf-extract text input.pdf -f 1 -l 3
    """
    try:
        result = extract_sync(input_pdf, ExtractOptions(
            first_page=first_page,
            last_page=last_page,
            normalize_whitespace=normalize_whitespace,
            disable_combine_text_items=disable_combine_text_items,
            password=password,
        ))
    except PDFExtractException as e:
        _fail(e)

    for page in result.pages:
        console.print(Rule(f"Page {page.num}"))
        console.print(page.content, markup=False, highlight=False, end="")

    if not result.pages:
        console.print("[yellow]No pages in the requested range.[/yellow]")


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--password', default=None, help='Password for encrypted PDFs', type=str)
def show_info(input_pdf, password):
    """
    Display document information of a PDF file.

    Example:

        pdf-extract info input.pdf
    """
    is_valid, error_msg = validate_pdf(input_pdf, password=password)
    if not is_valid:
        _fail(error_msg)

    try:
        num_pages, meta = get_pdf_info(input_pdf, password=password)
    except PDFExtractException as e:
        _fail(e)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(os.path.getsize(input_pdf)))
    table.add_row("Number of Pages", str(num_pages))
    for key, value in meta.info.items():
        table.add_row(key, str(value))
    if meta.metadata:
        for key, value in meta.metadata.items():
            table.add_row(key, str(value))

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    cli()
