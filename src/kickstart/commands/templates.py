"""kickstart list - Show available templates."""

import click
from rich.console import Console
from rich.table import Table

from kickstart.catalog import list_official
from kickstart.config import load_settings
from kickstart.registry import RegistryClient

console = Console()


@click.command()
@click.option("--remote/--no-remote", default=True, help="Include community templates from GitHub")
def list_cmd(remote: bool):
    """List official and community templates."""
    table = Table(title="Available Templates")
    table.add_column("Template", style="cyan")
    table.add_column("Source")
    table.add_column("Location", style="dim")

    for descriptor in list_official():
        table.add_row(descriptor.name, "official", descriptor.location)

    if remote:
        with console.status("Searching community templates..."):
            found = RegistryClient(load_settings()).search()
        for item in found:
            table.add_row(item.descriptor.name, f"{item.stars}⭑", item.descriptor.location)

    console.print(table)
    console.print("\n[bold]Usage:[/]")
    console.print("  kickstart init -t hello-world")
