"""CLI entry point for the surefire plugin."""

import asyncio
import logging
import sys
from pathlib import Path

import typer

from boostsec.surefire_plugin.config_loader import load_config
from boostsec.surefire_plugin.engines.pytest_engine import PytestEngine
from boostsec.surefire_plugin.errors import SurefireExecutionError
from boostsec.surefire_plugin.models.config import ForkMode
from boostsec.surefire_plugin.orchestrator import SurefireOrchestrator

# Configure logging - force reconfiguration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,  # Force reconfiguration even if already set up
)
logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command()
def main(
    config_path: Path = typer.Option(  # noqa: B008
        ..., "--config", help="Path to the surefire configuration file"
    ),
    skip: bool = typer.Option(False, "--skip", help="Bypass tests entirely"),
    test: str | None = typer.Option(
        None, "--test", help="Comma separated test names to run"
    ),
    fork_mode: ForkMode | None = typer.Option(  # noqa: B008
        None, "--fork-mode", case_sensitive=False, help="none, once or pertest"
    ),
    test_failure_ignore: bool = typer.Option(
        False, "--test-failure-ignore", help="Do not fail the build on test failures"
    ),
    debug: bool = typer.Option(False, "--debug", "-X", help="Enable debug output"),
) -> None:
    """Run the project's tests."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    logger.info(f"Configuration file: {config_path}")

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load configuration: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    overrides: dict[str, object] = {}
    if skip:
        overrides["skip"] = True
    if test is not None:
        overrides["test"] = test
    if fork_mode is not None:
        overrides["fork_mode"] = fork_mode
    if test_failure_ignore:
        overrides["test_failure_ignore"] = True
    if overrides:
        logger.info(f"Command line overrides: {sorted(overrides)}")
        config = config.model_copy(update=overrides)

    orchestrator = SurefireOrchestrator(PytestEngine())

    try:
        state = asyncio.run(orchestrator.execute(config))
    except SurefireExecutionError as e:
        logger.error(f"Build failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        if e.__cause__ is not None:
            typer.echo(f"Caused by: {e.__cause__}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Test run finished: {state.value}")


if __name__ == "__main__":  # pragma: no cover
    app()
