"""
Command-line interface for Ember.
This module provides commands to render the bundled example apps into an
in-memory host and inspect the resulting HTML.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ember.env import env
from ember.host.memory import MemoryElement, MemoryHost
from ember.renderer import render
from ember.version import __version__ as EMBER_VERSION

cli = typer.Typer(
	name="ember",
	help="Ember - a small retained-mode UI engine with hooks",
	no_args_is_help=True,
)


def configure_logging(level: str | None = None) -> None:
	if level is not None:
		env.log_level = level
	logging.basicConfig(
		level=env.log_level,
		format="%(message)s",
		handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
		force=True,
	)


@cli.callback()
def main(
	log_level: str | None = typer.Option(
		None,
		"--log-level",
		help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to EMBER_LOG_LEVEL.",
	),
):
	configure_logging(log_level)


@cli.command("demo")
def demo(
	app: str = typer.Argument("counter", help="Example app: 'counter' or 'todo'"),
	clicks: int = typer.Option(
		0, "--clicks", min=0, help="Click the first button this many times"
	),
):
	"""Render an example app and print its HTML after each click."""
	# Local import: the examples pull in the whole component API.
	from ember._examples import EXAMPLES

	console = Console()
	factory = EXAMPLES.get(app)
	if factory is None:
		choices = ", ".join(EXAMPLES)
		console.log(f"❌ Unknown example '{app}'. Choose one of: {choices}")
		raise typer.Exit(1)

	host = MemoryHost()
	root = MemoryElement("root")
	render(factory(), root, host=host)
	console.print(root.inner_html, markup=False, highlight=False, soft_wrap=True)

	for i in range(clicks):
		target = root.query_selector("button")
		if target is None:
			console.log("❌ The example has no button to click")
			raise typer.Exit(1)
		target.click()
		console.log(f"Click {i + 1}")
		console.print(root.inner_html, markup=False, highlight=False, soft_wrap=True)


@cli.command("version")
def version():
	"""Print the Ember version."""
	typer.echo(EMBER_VERSION)


__all__ = ["cli", "configure_logging"]
