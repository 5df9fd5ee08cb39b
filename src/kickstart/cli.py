"""Main CLI entry point for kickstart."""

import logging

import click

from kickstart import __version__
from kickstart.commands.init import init_cmd
from kickstart.commands.templates import list_cmd


@click.group()
@click.version_option(version=__version__, prog_name="kickstart")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """kickstart - Scaffold new projects from starter templates.

    \b
    Quick Start:
      kickstart init              Pick a template and create a project
      kickstart init -t NAME      Use an official template directly
      kickstart list              Show available templates
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


main.add_command(init_cmd, name="init")
main.add_command(list_cmd, name="list")


if __name__ == "__main__":
    main()
