"""
Command-line interface for PDF Worker.
"""

import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pdf_worker import __version__
from pdf_worker.types import (
    ErrorResponse,
    InfoResponse,
    MetadataOptions,
    Operation,
    TaskOptions,
    TaskRequest,
)
from pdf_worker.utils import format_file_size
from pdf_worker.worker import PDFWorker

console = Console()

INPUT_PDF = click.Path(exists=True, dir_okay=False)


def output_options(command):
    """Attach the shared ``--output`` / ``--output-dir`` options."""
    command = click.option(
        '--output-dir', '-d',
        default='./output',
        help='Directory for the generated file when --output is not given',
        type=click.Path(file_okay=False)
    )(command)
    command = click.option(
        '--output', '-o',
        default=None,
        help='Output PDF path',
        type=click.Path(dir_okay=False)
    )(command)
    return command


def _read_inputs(paths):
    return tuple(Path(path).read_bytes() for path in paths)


def _execute(operation, input_paths, options=None):
    """Run one task on a background worker while showing a spinner."""
    request = TaskRequest(
        operation=operation,
        input_documents=_read_inputs(input_paths),
        options=options or TaskOptions(),
    )
    with PDFWorker() as worker:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True
        ) as progress:
            task = progress.add_task(f"Running {operation.value}...", total=None)
            response = worker.submit(request).result()
            progress.update(task, completed=True)
    return response


def _fail(message):
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}")
    sys.exit(1)


def _run_and_save(operation, input_paths, options, output, output_dir):
    response = _execute(operation, input_paths, options)

    if isinstance(response, ErrorResponse):
        _fail(response.message)
    if isinstance(response, InfoResponse):  # pragma: no cover - info has its own command
        _fail("Info does not produce a document; use 'pdf-worker info'.")

    destination = Path(output) if output else Path(output_dir) / response.file_name
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(response.data)

    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {destination}")
    console.print(f"[dim]Output size: {format_file_size(len(response.data))}[/dim]")
    console.print()


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    PDF Worker CLI - Merge, rotate, secure, rearrange and annotate PDF files.
    """
    pass


@cli.command(name="merge")
@click.argument('input_pdfs', nargs=-1, required=True, type=INPUT_PDF)
@output_options
def merge(input_pdfs, output, output_dir):
    """
    Merge two or more PDFs, in the order given.

    Example:

        pdf-worker merge a.pdf b.pdf c.pdf -o merged.pdf
    """
    _run_and_save(Operation.MERGE, input_pdfs, TaskOptions(), output, output_dir)


@cli.command(name="rotate")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option(
    '--angle', '-a',
    required=True,
    help='Degrees added to every page rotation (multiple of 90)',
    type=int
)
@output_options
def rotate(input_pdf, angle, output, output_dir):
    """
    Rotate every page.

    Example:

        pdf-worker rotate input.pdf --angle 90
    """
    _run_and_save(Operation.ROTATE, [input_pdf], TaskOptions(rotation_angle=angle), output, output_dir)


@cli.command(name="protect")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--password', '-p', required=True, help='Password required to open the PDF', type=str)
@output_options
def protect(input_pdf, password, output, output_dir):
    """
    Encrypt a PDF with a password.

    Example:

        pdf-worker protect input.pdf -p secret -o locked.pdf
    """
    _run_and_save(Operation.PROTECT, [input_pdf], TaskOptions(password=password), output, output_dir)


@cli.command(name="unlock")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--password', '-p', required=True, help='Password of the encrypted PDF', type=str)
@output_options
def unlock(input_pdf, password, output, output_dir):
    """
    Remove password protection from a PDF.

    Example:

        pdf-worker unlock locked.pdf -p secret -o open.pdf
    """
    _run_and_save(Operation.UNLOCK, [input_pdf], TaskOptions(password=password), output, output_dir)


@cli.command(name="remove")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--pages', '-p', required=True, help="Pages to remove (e.g., '2,4-6,9')", type=str)
@output_options
def remove(input_pdf, pages, output, output_dir):
    """
    Remove pages from a PDF.

    Example:

        pdf-worker remove input.pdf -p '1,3-4'
    """
    _run_and_save(Operation.REMOVE, [input_pdf], TaskOptions(pages=pages), output, output_dir)


@cli.command(name="extract")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--pages', '-p', required=True, help="Pages to keep (e.g., '1,3,5,7-10')", type=str)
@output_options
def extract(input_pdf, pages, output, output_dir):
    """
    Extract pages into a new PDF.

    Example:

        pdf-worker extract input.pdf -p '1-5,10' -o selected.pdf
    """
    _run_and_save(Operation.EXTRACT, [input_pdf], TaskOptions(pages=pages), output, output_dir)


@cli.command(name="reorder")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option(
    '--order', '-p',
    required=True,
    help="New order listing every page once (e.g., '3,1,2')",
    type=str
)
@output_options
def reorder(input_pdf, order, output, output_dir):
    """
    Reorder the pages of a PDF.

    Example:

        pdf-worker reorder input.pdf --order '5,3,1,2,4'
    """
    _run_and_save(Operation.REORDER, [input_pdf], TaskOptions(pages=order), output, output_dir)


@cli.command(name="number")
@click.argument('input_pdf', type=INPUT_PDF)
@output_options
def number(input_pdf, output, output_dir):
    """
    Add "page / total" numbers at the bottom of every page.

    Example:

        pdf-worker number input.pdf -o numbered.pdf
    """
    _run_and_save(Operation.NUMBER, [input_pdf], TaskOptions(), output, output_dir)


@cli.command(name="watermark")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--text', '-t', required=True, help='Watermark text', type=str)
@output_options
def watermark(input_pdf, text, output, output_dir):
    """
    Stamp a diagonal text watermark on every page.

    Example:

        pdf-worker watermark input.pdf -t CONFIDENTIAL
    """
    _run_and_save(Operation.WATERMARK, [input_pdf], TaskOptions(watermark_text=text), output, output_dir)


@cli.command(name="metadata")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--title', help='New document title', type=str)
@click.option('--author', help='New document author', type=str)
@click.option('--subject', help='New document subject', type=str)
@output_options
def metadata(input_pdf, title, author, subject, output, output_dir):
    """
    Edit title, author and subject. Omitted fields keep their value.

    Example:

        pdf-worker metadata input.pdf --title "Annual Report" --author "Finance"
    """
    options = TaskOptions(metadata=MetadataOptions(title=title, author=author, subject=subject))
    _run_and_save(Operation.METADATA, [input_pdf], options, output, output_dir)


@cli.command(name="flatten")
@click.argument('input_pdf', type=INPUT_PDF)
@output_options
def flatten(input_pdf, output, output_dir):
    """
    Rewrite a PDF through the PDF library.

    Example:

        pdf-worker flatten input.pdf -o flat.pdf
    """
    _run_and_save(Operation.FLATTEN, [input_pdf], TaskOptions(), output, output_dir)


@cli.command(name="info")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--password', '-p', default=None, help='Password for encrypted PDFs', type=str)
def show_info(input_pdf, password):
    """
    Display information about a PDF file.

    Example:

        pdf-worker info input.pdf
    """
    response = _execute(Operation.INFO, [input_pdf], TaskOptions(password=password))
    if isinstance(response, ErrorResponse):
        _fail(response.message)

    info = response.info
    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(os.path.getsize(input_pdf)))
    table.add_row("Number of Pages", str(info.page_count))
    table.add_row("Encrypted", "Yes" if info.encrypted else "No")

    if info.title:
        table.add_row("Title", info.title)
    if info.author:
        table.add_row("Author", info.author)
    if info.subject:
        table.add_row("Subject", info.subject)

    console.print()
    console.print(table)
    console.print()


if __name__ == '__main__':
    cli()
