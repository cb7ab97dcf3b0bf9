"""Main CLI entry point with command groups"""

import click

from cpfcheck.__version__ import __version__
from cpfcheck.cli.results import results_command
from cpfcheck.cli.run import run_command
from cpfcheck.cli.shell import shell_command
from cpfcheck.utils import setup_logging


class DefaultCommandGroup(click.Group):
    """Custom Click Group that falls back to the interactive shell"""

    def parse_args(self, ctx, args):
        # During shell completion, don't redirect to the default command
        if ctx.resilient_parsing:
            return super().parse_args(ctx, args)

        # If --help or --version is requested, show group help/version
        if args and args[0] in ('--help', '-h', '--version'):
            return super().parse_args(ctx, args)

        if args and args[0] in self.commands:
            return super().parse_args(ctx, args)

        # Otherwise, treat as shell command (default)
        return super().parse_args(ctx, ['shell'] + args)


@click.group(cls=DefaultCommandGroup)
@click.version_option(version=__version__, prog_name='cpfcheck')
def cli():
    """
    cpfcheck - Validate CPF lists in parallel and benchmark thread counts.

    \b
    Commands:
      cpfcheck                    Interactive thread-count loop (default command)
      cpfcheck run -t 5           Single run with 5 threads
      cpfcheck results            Show saved timings per thread count

    \b
    Examples:
      cpfcheck --input-dir ./cpfs
      cpfcheck run --threads 10 --json
      cpfcheck results --results-dir ./resultados

    \b
    Environment:
      CPFCHECK_INPUT_DIR      Input directory (default: cpfs)
      CPFCHECK_RESULTS_DIR    Timing records directory (default: resultados)
      CPFCHECK_LOG_LEVEL      stderr logging level (default: WARNING)
    """
    setup_logging()


# Register subcommands (shell is the default command)
cli.add_command(shell_command, name='shell')
cli.add_command(run_command, name='run')
cli.add_command(results_command, name='results')


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
