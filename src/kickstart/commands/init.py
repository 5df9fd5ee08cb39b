"""kickstart init - Create a new project from a template."""

import sys

import click
from rich.console import Console

from kickstart.catalog import TEMPLATES, get_official
from kickstart.config import load_settings
from kickstart.errors import KickstartError, OverwriteDeclined
from kickstart.init_manager import InitContext, InitManager
from kickstart.registry import RegistryClient
from kickstart.selector import TemplateSelector

console = Console()

# Exit status when the user refuses to overwrite an existing directory
DECLINED_EXIT_CODE = -1


@click.command()
@click.option("--name", "-n", default=None, help="Project name (defaults to the template name)")
@click.option(
    "--output-dir",
    "-o",
    default=".",
    show_default=True,
    help="Directory the project folder is created in",
)
@click.option(
    "--template",
    "-t",
    default=None,
    help="Official template to use (skips the interactive picker)",
)
@click.option("--force", is_flag=True, help="Overwrite an existing project without asking")
@click.option("--skip-install", is_flag=True, help="Do not install dependencies")
def init_cmd(name: str, output_dir: str, template: str, force: bool, skip_install: bool):
    """Create a new project from a starter template.

    Without --template, pick from the official templates and community
    templates found on GitHub. Type to filter, enter a number to choose.

    \b
    Examples:
      kickstart init                          Pick interactively
      kickstart init -t hello-world -o apps   Create apps/hello-world
      kickstart init -t web-app -n shop       Create ./shop
    """
    descriptor = None
    if template:
        descriptor = get_official(template)
        if descriptor is None:
            console.print(f"[red]Error:[/] Unknown template '{template}'. Available: {', '.join(TEMPLATES)}")
            raise SystemExit(1)

    settings = load_settings()
    selector = TemplateSelector(RegistryClient(settings), console=console)
    context = InitContext(
        name=name,
        output_dir=output_dir,
        template=descriptor,
        args=sys.argv[1:],
        force=force,
        skip_install=skip_install,
    )
    manager = InitManager(context, selector=selector, console=console)

    try:
        manager.run()
    except OverwriteDeclined:
        raise SystemExit(DECLINED_EXIT_CODE)
    except KickstartError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)
