from typing import Optional
import unittest
import typer
from .colors import apply_color, no_color
from .config import find_config_file, load_config_or_fallback
from .logging import setup_logging
from .runners.runner import PrettyTestRunner

app = typer.Typer(add_completion=False, help="Progress Printer - grouped, colored unittest progress output")

@app.command()
def run(
    start_dir: str = typer.Argument(".", help="Directory to start test discovery from"),
    pattern: str = typer.Option("test*.py", "--pattern", "-p", help="Pattern matching test files"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to printer YAML (default: nearest progress-printer.yml)"),
    simple: Optional[bool] = typer.Option(None, "--simple/--markers", help="Force ASCII outcome codes or configured markers"),
    hide_groups: Optional[bool] = typer.Option(None, "--hide-groups/--show-groups", help="Hide or show test class headers"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Repeat for one labelled outcome per line"),
    color: bool = typer.Option(True, "--color/--no-color", help="Emit ANSI colors"),
    failfast: bool = typer.Option(False, "--failfast", "-f", help="Stop on first failure or error"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
):
    setup_logging(log_level.upper())
    suite = unittest.defaultTestLoader.discover(start_dir, pattern=pattern)
    runner = PrettyTestRunner(
        verbosity=1 + verbose,
        config=config,
        colorize=apply_color if color else no_color,
        simple_output=simple,
        hide_group_header=hide_groups,
        failfast=failfast,
    )
    result = runner.run(suite)
    raise typer.Exit(code=0 if result.wasSuccessful() else 1)

@app.command("show-config")
def show_config(config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to printer YAML")):
    path = config or find_config_file()
    cfg, error = load_config_or_fallback(path)
    typer.echo(f"Configuration: {path}")
    if error:
        typer.echo(f"Unable to load configuration ({error}); showing fallback.", err=True)
    typer.echo(cfg.model_dump_json(indent=2, by_alias=True))
