"""CLI entrypoints for wrapcalc."""

from pathlib import Path

import rich_click as click

from wrapcalc import __version__
from wrapcalc.controllers import BenchmarkCommand, CalculateCommand, CalculatorCliController
from wrapcalc.failures import ProcessingFailure
from wrapcalc.runners import RunStrategy

click.rich_click.USE_MARKDOWN = True
CONTROLLER = CalculatorCliController()
STRATEGY_CHOICES = [strategy.value for strategy in RunStrategy]


@click.command()
@click.version_option(version=__version__, prog_name="wrapcalc")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--strategy",
    type=click.Choice(STRATEGY_CHOICES, case_sensitive=False),
    default=None,
    help="Accumulation strategy. If omitted, WRAPCALC_STRATEGY or `sequential` is used.",
)
def wrapcalc(paths: tuple[Path, ...], strategy: str | None) -> None:
    """Apply the operations in PATHS to one wrapping byte and print the result.

    Each line is `<operator> <operand>` with operator one of `+ - * /` and an
    operand in `[0, 255]`. Bad lines and unreadable files are reported on
    stderr and skipped.
    """

    try:
        result = CONTROLLER.calculate(
            CalculateCommand(paths=paths, strategy=strategy),
            on_failure=_echo_failure,
        )
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(str(result.value))


@click.command()
@click.version_option(version=__version__, prog_name="wrapcalc-bench")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--strategy",
    "strategies",
    type=click.Choice(STRATEGY_CHOICES, case_sensitive=False),
    multiple=True,
    help="Strategy to time. Can be repeated; defaults to all three.",
)
@click.option(
    "--repeat",
    type=click.IntRange(min=1),
    default=None,
    help="Runs per strategy. If omitted, WRAPCALC_BENCHMARK_REPEAT or 1 is used.",
)
def wrapcalc_bench(paths: tuple[Path, ...], strategies: tuple[str, ...], repeat: int | None) -> None:
    """Time sequential, lock-based and channel-based runs over the same PATHS."""

    try:
        lines = CONTROLLER.benchmark(
            BenchmarkCommand(
                paths=paths,
                strategies=tuple(strategy.lower() for strategy in strategies),
                repeat=repeat,
            ),
        )
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    _emit_lines(lines)


def _echo_failure(failure: ProcessingFailure) -> None:
    click.echo(failure.render(), err=True)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    wrapcalc()
