"""Main CLI interface for the language server installer."""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print as rich_print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config.assets import url_maker
from ..config.manager import ConfigManager
from ..config.models import InstallerConfig, PackageManagerServer, ToolchainServer
from ..core.manager import InstallManager, InstallReport, Operation

app = typer.Typer(
    help="Install and update language servers: <mode> <language...|all>",
    add_completion=False,
)
console = Console()

LIST_MODE = "list"


@app.command()
def run(
    mode: Optional[str] = typer.Argument(
        None, help="install, update or list", show_default=False
    ),
    languages: Optional[List[str]] = typer.Argument(
        None, help="Languages to process, or 'all'", show_default=False
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
    root_dir: Optional[Path] = typer.Option(
        None, "--root-dir", help="Directory holding packages and extracted archives"
    ),
    bin_dir: Optional[Path] = typer.Option(
        None, "--bin-dir", help="Directory receiving the executable symlinks"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with status 1 if any installer fails"
    ),
):
    """Install or update language servers."""
    if mode is None:
        rich_print("[red]No argument[/red]")
        raise typer.Exit(1)

    try:
        installer_config = ConfigManager(config).load_config(
            root_dir=root_dir, bin_dir=bin_dir
        )
    except Exception as e:
        rich_print(f"[red]Error loading configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    setup_logging(verbose, installer_config.settings.log_level)

    if mode == LIST_MODE:
        list_servers(installer_config)
        return

    if not languages:
        rich_print("[red]Missing arguments[/red]")
        raise typer.Exit(1)

    try:
        operation = Operation(mode)
    except ValueError:
        rich_print(f"[red]Unknown mode: {mode} (expected install or update)[/red]")
        raise typer.Exit(1)

    manager = InstallManager(installer_config)
    installers = manager.resolve(languages)
    if not installers:
        rich_print("[red]No valid language[/red]")
        raise typer.Exit(1)

    report = asyncio.run(manager.run(operation, installers))
    show_report(operation, report)

    if strict and not report.ok:
        raise typer.Exit(1)


def list_servers(config: InstallerConfig):
    """Print the server registry."""
    table = Table(title="Known Language Servers")
    table.add_column("Language", style="cyan")
    table.add_column("Mode", style="magenta")
    table.add_column("Package", style="yellow")
    table.add_column("Binary", style="blue")
    table.add_column("Source", style="green")

    for language, server in config.servers.items():
        if isinstance(server, PackageManagerServer):
            binary, source = server.bin_name, config.settings.package_manager
        elif isinstance(server, ToolchainServer):
            binary, source = server.package.rsplit("/", 1)[-1], server.toolchain
        else:
            binary = server.link_target or "-"
            source = url_maker(language, config.assets) or "[red]no asset[/red]"
        table.add_row(language, server.mode, server.package, binary, source)

    console.print(table)


def show_report(operation: Operation, report: InstallReport):
    """Print one line per language."""
    for language in report.succeeded:
        rich_print(f"  [green]✓[/green] {language}: {operation.value} done")
    for language, error in report.failed.items():
        rich_print(f"  [red]✗[/red] {language}: {escape(str(error))}")


def setup_logging(verbose: bool, log_level: str = "info"):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper())
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def main():
    """Main entry point for CLI."""
    app()
