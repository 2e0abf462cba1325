"""Command Line Interface for OPZ Backup."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .backup import (
    BackupOrchestrator,
    BackupOutcome,
    BackupStorage,
    CommandError,
    CopyError,
    DestinationError,
    DeviceNotFound,
    Success,
)
from .config import BackupSettings, load_config, save_config
from .discovery import DiskListingError, Found, locate_device
from .util import format_size, get_logger, setup_logging

console = Console()

RECONNECT_STEPS = [
    "Turn the device off",
    "Hold I and turn it back on",
    "Plug in the USB cable",
]


def setup_cli_logging(settings: BackupSettings, verbose: bool = False):
    """Setup logging for CLI."""
    setup_logging(level=settings.log_level, verbose=verbose, log_file=settings.log_file, console=console)


def report_outcome(outcome: BackupOutcome) -> int:
    """Print the result of a run and return the process exit status."""
    if isinstance(outcome, Success):
        console.print(f"[bold green]✓ {format_size(outcome.bytes_copied)} copied[/bold green]")
        console.print(f"Location: {outcome.destination}")
        return 0

    if isinstance(outcome, DeviceNotFound):
        console.print(f"[red]✗ No {outcome.pattern} found[/red]")
        console.print("[bold]To mount it as a disk:[/bold]")
        for i, step in enumerate(RECONNECT_STEPS, 1):
            console.print(f"{i}. {step}")
        return 1

    if isinstance(outcome, CommandError):
        console.print(f"[red]✗ Could not list mounted disks: {outcome.message}[/red]")
    elif isinstance(outcome, DestinationError):
        console.print(f"[red]✗ {outcome.message}[/red]")
    elif isinstance(outcome, CopyError):
        console.print(f"[red]✗ {outcome.message}[/red]")
        console.print(f"[yellow]Some files may already be in {outcome.destination}[/yellow]")
    return 1


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--config", "-c", type=click.Path(exists=True, path_type=Path), help="Configuration file path")
@click.pass_context
def cli(ctx, verbose: bool, config: Optional[Path]):
    """OPZ Backup - copy a USB-mounted OP-Z to a timestamped local folder."""
    ctx.ensure_object(dict)

    try:
        settings = load_config(config)
        setup_cli_logging(settings, verbose)
    except Exception as e:
        console.print(f"[red]Error loading configuration: {escape(str(e))}[/red]")
        sys.exit(1)

    ctx.obj["settings"] = settings

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command("run")
@click.option("--pattern", "-p", help="Device name fragment to look for")
@click.option("--backup-root", "-o", type=click.Path(file_okay=False, path_type=Path), help="Backup root directory")
@click.pass_context
def run(ctx, pattern: Optional[str], backup_root: Optional[Path]):
    """Back up the device to a new snapshot."""
    settings: BackupSettings = ctx.obj["settings"]

    updates = {}
    if pattern:
        updates["device_pattern"] = pattern
    if backup_root:
        updates["backup_root"] = backup_root
    if updates:
        settings = settings.model_copy(update=updates)

    logger = get_logger(__name__)
    logger.debug(f"Backing up {settings.device_pattern!r} into {settings.backup_root}")

    outcome = BackupOrchestrator(settings, console=console).run()
    ctx.exit(report_outcome(outcome))


@cli.command("mounts")
@click.option("--pattern", "-p", help="Device name fragment to look for")
@click.pass_context
def mounts(ctx, pattern: Optional[str]):
    """Show candidate mount points without copying anything."""
    settings: BackupSettings = ctx.obj["settings"]
    pattern = pattern or settings.device_pattern

    try:
        candidates = BackupOrchestrator(settings, console=console).discover_mounts()
    except DiskListingError as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(1)

    if not candidates:
        console.print("[yellow]No removable volumes found[/yellow]")
        return

    discovery = locate_device(candidates, pattern)
    selected = discovery.mount_point if isinstance(discovery, Found) else None

    table = Table(title="Mounted Volumes")
    table.add_column("Device", style="cyan")
    table.add_column("Path", style="white")
    table.add_column("Selected", style="green")

    for mount in candidates:
        table.add_row(mount.device_name, mount.path, "Yes" if mount == selected else "")

    console.print(table)


@cli.command("list")
@click.pass_context
def list_snapshots(ctx):
    """List existing snapshots, newest first."""
    settings: BackupSettings = ctx.obj["settings"]
    storage = BackupStorage(settings.backup_root)

    snapshots = storage.list_snapshots()
    if not snapshots:
        console.print(f"[yellow]No backups found in {settings.backup_root}[/yellow]")
        return

    table = Table(title=f"Backups in {settings.backup_root}")
    table.add_column("Snapshot", style="cyan")
    table.add_column("Size", style="white")

    for snapshot in snapshots:
        table.add_row(snapshot.name, format_size(storage.get_snapshot_size(snapshot)))

    console.print(table)


@cli.command("init-config")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Where to write the file")
@click.pass_context
def init_config(ctx, output: Optional[Path]):
    """Write the current settings to a configuration file."""
    path = save_config(ctx.obj["settings"], output)
    console.print(f"Configuration written to {path}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
