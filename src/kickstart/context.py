"""Context objects handed to package managers and init hooks.

Per-project settings are merged from three layers, later layers win:

1. ProjectConfig defaults
2. the ``kickstart`` section of the project's package.json
3. ``.kickstart/config.json`` in the project root
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console

from kickstart.errors import KickstartError
from kickstart.metadata import PACKAGE_JSON

logger = logging.getLogger(__name__)

CONFIG_SECTION = "kickstart"
CONFIG_DIR = ".kickstart"
CONFIG_FILE = "config.json"


class ProjectConfigError(KickstartError):
    """A project declares settings of the wrong type."""
    pass


@dataclass
class ProjectConfig:
    """Settings a generated project declares for kickstart."""
    packager: str = "npm"
    init_hooks: List[str] = field(default_factory=list)  # shell commands

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectConfig":
        values = {
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        }
        if "packager" in values and not isinstance(values["packager"], str):
            raise ProjectConfigError(f"'packager' must be a string, got {values['packager']!r}")
        hooks = values.get("init_hooks")
        if isinstance(hooks, str):
            values["init_hooks"] = [hooks]
        elif hooks is None:
            values.pop("init_hooks", None)
        else:
            if not isinstance(hooks, list) or not all(isinstance(h, str) for h in hooks):
                raise ProjectConfigError(f"'init_hooks' must be a list of commands, got {hooks!r}")
        return cls(**values)


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning("Ignoring invalid JSON in %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def load_project_config(project_dir: Path, pkg: Optional[Dict[str, Any]] = None) -> ProjectConfig:
    """Merge the project's declared settings over the defaults."""
    if pkg is None:
        pkg = _read_json(project_dir / PACKAGE_JSON)
    merged: Dict[str, Any] = {}
    section = pkg.get(CONFIG_SECTION)
    if isinstance(section, dict):
        merged.update(section)
    merged.update(_read_json(project_dir / CONFIG_DIR / CONFIG_FILE))
    return ProjectConfig.from_dict(merged)


@dataclass
class CliContext:
    """Shared state for collaborators working on a generated project."""
    program: str
    args: List[str]
    project_dir: Path
    pkg: Dict[str, Any] = field(default_factory=dict)
    config: ProjectConfig = field(default_factory=ProjectConfig)
    name: Optional[str] = None
    output_dir: Optional[str] = None

    @classmethod
    def create(cls, program: str, args: List[str], output_dir: Path) -> "CliContext":
        """Build a context bound to the project at ``output_dir``."""
        project_dir = Path(output_dir)
        pkg = _read_json(project_dir / PACKAGE_JSON)
        return cls(
            program=program,
            args=list(args),
            project_dir=project_dir,
            pkg=pkg,
            config=load_project_config(project_dir, pkg),
        )


@dataclass
class HookContext:
    """What an init hook gets to see."""
    project_dir: Path
    name: str
    pkg: Dict[str, Any]
    config: ProjectConfig
    console: Console

    @classmethod
    def create(cls, cli_context: CliContext, console: Optional[Console] = None) -> "HookContext":
        return cls(
            project_dir=cli_context.project_dir,
            name=cli_context.name or cli_context.pkg.get("name", ""),
            pkg=cli_context.pkg,
            config=cli_context.config,
            console=console or Console(),
        )
