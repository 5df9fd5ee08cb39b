"""Post-initialization hooks.

Hooks run against a freshly generated project, in this order:

1. in-process hooks registered with ``register_init_hook``
2. hooks exposed by installed plugins under the ``kickstart.init_hooks``
   entry-point group
3. shell commands listed in the project's ``init_hooks`` setting

A failing hook stops the run; nothing is rolled back.
"""

import logging
import subprocess
from importlib.metadata import entry_points
from typing import Callable, List

from kickstart.context import HookContext
from kickstart.errors import KickstartError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "kickstart.init_hooks"

InitHook = Callable[[HookContext], None]

_registered: List[InitHook] = []


class HookError(KickstartError):
    """A command hook exited with a non-zero status."""

    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


def register_init_hook(hook: InitHook) -> InitHook:
    """Register a hook to run after every init. Usable as a decorator."""
    if hook not in _registered:
        _registered.append(hook)
    return hook


def unregister_init_hook(hook: InitHook) -> None:
    if hook in _registered:
        _registered.remove(hook)


def clear_init_hooks() -> None:
    _registered.clear()


def _plugin_hooks() -> List[InitHook]:
    return [ep.load() for ep in entry_points(group=ENTRY_POINT_GROUP)]


def _command_hook(command: str) -> InitHook:
    def run(ctx: HookContext) -> None:
        ctx.console.print(f"[dim]$ {command}[/]")
        result = subprocess.run(command, shell=True, cwd=str(ctx.project_dir))
        if result.returncode != 0:
            raise HookError(f"Init hook failed: {command} (exit {result.returncode})", result.returncode)
    run.__name__ = f"command:{command}"
    return run


class HookExecutor:
    """Runs init hooks sequentially."""

    def collect_init_hooks(self, ctx: HookContext) -> List[InitHook]:
        hooks = list(_registered)
        hooks.extend(_plugin_hooks())
        hooks.extend(_command_hook(cmd) for cmd in ctx.config.init_hooks)
        return hooks

    def execute_init_hooks(self, ctx: HookContext) -> int:
        """Run every init hook against ``ctx``.

        Returns:
            Number of hooks executed
        """
        hooks = self.collect_init_hooks(ctx)
        for hook in hooks:
            logger.debug("Running init hook %s", getattr(hook, "__name__", hook))
            hook(ctx)
        return len(hooks)
