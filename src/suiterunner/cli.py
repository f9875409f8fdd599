"""Command-line interface for suiterunner."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from suiterunner import __version__
from suiterunner.config import SuiteRunnerConfig, create_example_config
from suiterunner.core.models import ExecutionPlan
from suiterunner.core.runner import SuiteRunner
from suiterunner.errors import ConfigurationError, SuiteRunnerError, TargetLoadError
from suiterunner.loader import load_target


console = Console()
err_console = Console(stderr=True)


def print_banner() -> None:
    """Print the suiterunner banner."""
    console.print(
        Panel.fit(
            "[bold blue]suiterunner[/bold blue] - annotation-driven test harness",
            subtitle=f"v{__version__}",
        )
    )


def configure_logging(level: int) -> None:
    """Send library log records through rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_config(config_path: Optional[str]) -> SuiteRunnerConfig:
    if config_path:
        return SuiteRunnerConfig.from_file(config_path)
    return SuiteRunnerConfig.find_and_load()


def _prepare(ctx: click.Context, target: str) -> tuple[SuiteRunnerConfig, SuiteRunner]:
    """Load configuration and the target class, exiting on failure."""
    try:
        config = _load_config(ctx.obj.get("config_path"))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading configuration:[/red] {escape(str(e))}")
        sys.exit(1)

    level = logging.DEBUG if ctx.obj.get("verbose") else config.log_level_number
    configure_logging(level)

    try:
        unit = load_target(target)
    except TargetLoadError as e:
        console.print(f"[red]Cannot load target:[/red] {escape(str(e))}")
        sys.exit(2)

    return config, SuiteRunner(unit, config=config.runner)


@click.group()
@click.version_option(version=__version__, prog_name="suiterunner")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False),
    help="Path to configuration file (default: suiterunner.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: Optional[str], verbose: bool) -> None:
    """suiterunner - run the annotated methods of a test class.

    Tests run in priority order, wrapped in their before/after hooks.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config


@main.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default="suiterunner.json",
    help="Output path for configuration file",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing configuration")
def init(output: str, force: bool) -> None:
    """Initialize a new suiterunner configuration file."""
    print_banner()

    output_path = Path(output)
    if output_path.exists() and not force:
        console.print(f"[yellow]Configuration file already exists:[/yellow] {output_path}")
        console.print("Use --force to overwrite")
        sys.exit(1)

    try:
        create_example_config(output_path)
    except OSError as e:
        console.print(f"[red]Error creating configuration:[/red] {escape(str(e))}")
        sys.exit(1)
    console.print(f"[green]Created configuration file:[/green] {output_path}")


@main.command()
@click.argument("target")
@click.pass_context
def plan(ctx: click.Context, target: str) -> None:
    """Show the execution plan for TARGET (module:ClassName) without running it."""
    _, runner = _prepare(ctx, target)

    try:
        execution_plan = runner.plan()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)

    _display_plan(execution_plan)


@main.command()
@click.argument("target")
@click.pass_context
def run(ctx: click.Context, target: str) -> None:
    """Run the annotated methods of TARGET (module:ClassName)."""
    print_banner()
    config, runner = _prepare(ctx, target)

    try:
        if config.output.show_plan:
            _display_plan(runner.plan())
        outcome = runner.run()
    except SuiteRunnerError as e:
        console.print(f"\n[red]{type(e).__name__}:[/red] {escape(str(e))}")
        sys.exit(1)

    console.print(
        f"\n[green]Completed {outcome.unit_name}:[/green] "
        f"{len(outcome.tests_run)} tests, {len(outcome.invoked)} invocations"
    )
    if ctx.obj.get("verbose"):
        console.print(f"[dim]Invocation order: {', '.join(outcome.invoked)}[/dim]")


def _display_plan(execution_plan: ExecutionPlan) -> None:
    """Display the ordered tests and hooks of a plan."""
    table = Table(title=f"Execution Plan: {execution_plan.unit_name}")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Method")
    table.add_column("Priority", justify="right")
    table.add_column("Arguments", style="dim")

    for index, planned in enumerate(execution_plan.tests, start=1):
        args = ", ".join(repr(a) for a in planned.args) if planned.parameterized else "-"
        table.add_row(str(index), planned.name, str(planned.priority), escape(args))

    console.print(table)

    hooks = Table(show_header=False, box=None)
    hooks.add_column("Hook", style="bold")
    hooks.add_column("Methods")
    hooks.add_row("BeforeSuite", execution_plan.before_suite.name if execution_plan.before_suite else "-")
    hooks.add_row("BeforeTest", ", ".join(m.name for m in execution_plan.before_test) or "-")
    hooks.add_row("AfterTest", ", ".join(m.name for m in execution_plan.after_test) or "-")
    hooks.add_row("AfterSuite", execution_plan.after_suite.name if execution_plan.after_suite else "-")
    console.print(hooks)


if __name__ == "__main__":
    main()
