"""The ``kickstart init`` workflow.

select template -> check output dir -> materialize -> render package.json
-> install dependencies -> run init hooks
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console

from kickstart.catalog import TemplateDescriptor
from kickstart.context import CliContext, HookContext
from kickstart.errors import OverwriteDeclined
from kickstart.hooks import HookExecutor
from kickstart.materializer import materialize
from kickstart.metadata import render_package_json
from kickstart.packager import get_packager
from kickstart.selector import TemplateSelector

logger = logging.getLogger(__name__)


@dataclass
class InitContext:
    """Session state for a single init run."""
    name: Optional[str] = None
    output_dir: str = "."
    template: Optional[TemplateDescriptor] = None
    program: str = "kickstart"
    args: List[str] = field(default_factory=list)
    force: bool = False
    skip_install: bool = False
    cli_context: Optional[CliContext] = field(default=None, repr=False)  # created on first use


@dataclass
class InitResult:
    """Outcome of a completed init run."""
    name: str
    output_dir: Path
    template: TemplateDescriptor
    hooks_run: int = 0


class InitManager:
    """Drives one init run from template selection to hooks."""

    def __init__(
        self,
        context: InitContext,
        selector: Optional[TemplateSelector] = None,
        console: Optional[Console] = None,
        hook_executor: Optional[HookExecutor] = None,
    ):
        self.context = context
        self.console = console or Console()
        self.selector = selector or TemplateSelector(console=self.console)
        self.hook_executor = hook_executor or HookExecutor()

    @property
    def output_dir(self) -> Path:
        # The name may only be known after selection; never cache this.
        return (Path.cwd() / self.context.output_dir / (self.context.name or "")).resolve()

    def run(self) -> InitResult:
        self.output()
        self.render()
        if self.context.skip_install:
            self.console.print("[dim]Skipping dependency installation[/]")
        else:
            self.install()
        return self.execute_hooks()

    def output(self) -> None:
        self.select_template()
        self.check_output_dir()
        self.do_output()

    def select_template(self) -> TemplateDescriptor:
        if self.context.template is None:
            self.context.template = self.selector.select()
        self.context.name = self.context.name or self.context.template.name
        logger.debug("Selected template %s for %s", self.context.template, self.context.name)
        return self.context.template

    def check_output_dir(self) -> None:
        """Ask before overwriting an existing output directory.

        Raises:
            OverwriteDeclined: If the user says no
        """
        output_dir = self.output_dir
        if not output_dir.exists() or self.context.force:
            return
        if not click.confirm("App already exists, overwrite the app"):
            raise OverwriteDeclined(output_dir)

    def do_output(self) -> None:
        materialize(self.context.template, self.output_dir)

    def render(self) -> None:
        render_package_json(self.output_dir, self.context.name)

    def install(self) -> None:
        ctx = self.get_cli_context()
        get_packager(ctx.config.packager).install(self.output_dir, {})

    def execute_hooks(self) -> InitResult:
        output_dir = self.output_dir
        cli_context = self.get_cli_context()
        os.chdir(output_dir)
        hook_context = HookContext.create(cli_context, console=self.console)
        hooks_run = self.hook_executor.execute_init_hooks(hook_context)
        self.console.print(
            f"[bold green]Success![/] Initialized \"{self.context.template.name}\" "
            f"example in [bold blue]{output_dir}[/]."
        )
        return InitResult(
            name=self.context.name,
            output_dir=output_dir,
            template=self.context.template,
            hooks_run=hooks_run,
        )

    def get_cli_context(self) -> CliContext:
        if self.context.cli_context is None:
            cli_context = CliContext.create(self.context.program, self.context.args, self.output_dir)
            cli_context.name = self.context.name
            cli_context.output_dir = self.context.output_dir
            self.context.cli_context = cli_context
        return self.context.cli_context
