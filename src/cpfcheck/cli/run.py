"""CLI command for a single non-interactive validation run"""

import sys

import click

from cpfcheck import prometheus as prom
from cpfcheck.config import VALID_THREAD_OPTIONS, get_input_dir, get_results_dir
from cpfcheck.coordinator import run_validation
from cpfcheck.discovery import list_txt_files
from cpfcheck.shell import format_run_report


@click.command('run')
@click.option(
    '--threads',
    '-t',
    'num_threads',
    required=True,
    type=click.Choice([str(o) for o in VALID_THREAD_OPTIONS]),
    help='Number of worker threads',
)
@click.option('--input-dir', type=click.Path(file_okay=False), default=None, help='Directory with .txt CPF lists')
@click.option('--results-dir', type=click.Path(file_okay=False), default=None, help='Directory for timing records')
@click.option('--json', 'json_output', is_flag=True, help='Output in JSON format')
@click.option('--metrics', 'show_metrics', is_flag=True, help='Print Prometheus metrics after the report')
def run_command(
    num_threads: str,
    input_dir: str | None,
    results_dir: str | None,
    json_output: bool,
    show_metrics: bool,
):
    """Validate all input files once with the given thread count.

    \b
    Examples:
        cpfcheck run -t 1
        cpfcheck run -t 15 --input-dir data/cpfs --json
        cpfcheck run -t 5 --metrics
    """
    if json_output and show_metrics:
        raise click.UsageError('--metrics cannot be combined with --json')

    input_dir = input_dir or get_input_dir()
    results_dir = results_dir or get_results_dir()

    files = list_txt_files(input_dir)
    if not files:
        click.echo(f"No .txt files found in '{input_dir}'.", err=True)
        sys.exit(1)

    result = run_validation(files, int(num_threads), results_dir)

    if json_output:
        click.echo(result.model_dump_json(indent=2))
        return

    for line in format_run_report(result):
        click.echo(line)

    if show_metrics:
        click.echo()
        click.echo(prom.export_metrics(), nl=False)
