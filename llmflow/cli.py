from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml

from llmflow.config import FlowConfig
from llmflow.core.errors import ExecutionError, NodeError, RetryLimitExceeded
from llmflow.core.node import Node
from llmflow.logger import configure_logging, get_logger


app = typer.Typer(help="Run and inspect llmflow nodes")

EXIT_RETRY_LIMIT = 1
EXIT_BAD_CONFIG = 2


def _load_config(config: Optional[Path]) -> FlowConfig:
    try:
        return FlowConfig.from_yaml(config)
    except ValueError as exc:
        # malformed YAML and pydantic.ValidationError both arrive as ValueError
        typer.echo(f"Invalid config: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_CONFIG) from exc


def _always_fail(node: Node) -> None:
    raise ExecutionError(f"forced failure in {node.name}")


@app.command()
def run(
    name: Optional[str] = typer.Option(None, help="Node name (config value by default)"),
    retries: Optional[int] = typer.Option(None, help="Retries after the first failure"),
    wait: Optional[int] = typer.Option(None, help="Seconds to wait between retries"),
    config: Optional[Path] = typer.Option(None, help="Path to YAML config"),
    fail: bool = typer.Option(False, help="Make every attempt fail"),
) -> None:
    """Build a single node and execute it."""
    cfg = _load_config(config)
    configure_logging(cfg.logging.level, cfg.logging.format)
    log_event = get_logger("cli")

    try:
        node = cfg.node.build(name)
        if retries is not None:
            node = node.with_retries(retries)
        if wait is not None:
            node = node.with_wait(wait)
    except NodeError as exc:
        log_event.error("cli.bad_node", error=str(exc))
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_BAD_CONFIG) from exc

    if fail:
        node = node.with_logic(_always_fail)

    try:
        result = node.execute()
    except RetryLimitExceeded as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=EXIT_RETRY_LIMIT) from exc

    typer.echo(f"✅ {result.message} (attempts: {result.attempts})")


@app.command("show-config")
def show_config(
    config: Optional[Path] = typer.Option(None, help="Path to YAML config"),
) -> None:
    """Print the resolved config as YAML."""
    cfg = _load_config(config)
    typer.echo(yaml.safe_dump(cfg.model_dump(mode="json"), sort_keys=False).rstrip())


if __name__ == "__main__":
    app()
