"""Produce the on-disk project skeleton from a template descriptor."""

import logging
import shutil
from pathlib import Path
from typing import Optional

from kickstart.catalog import PLACEHOLDER, TEMPLATE_ROOT, TemplateDescriptor
from kickstart.git.utils import clone_shallow

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ("http://", "https://")


def is_local_template(location: str) -> bool:
    """True unless the location is an http(s) URL."""
    return not location.startswith(REMOTE_SCHEMES)


def resolve_location(location: str, root: Optional[Path] = None) -> Path:
    """Substitute the template root into a local location pattern."""
    root = root or TEMPLATE_ROOT
    return Path(location.replace(PLACEHOLDER, str(root)))


def materialize(descriptor: TemplateDescriptor, output_dir: Path, root: Optional[Path] = None) -> None:
    """Copy or clone a template into ``output_dir``.

    Local templates are copied over whatever already exists in the
    destination. Remote templates replace the destination with a fresh
    shallow clone. Returns only once the skeleton is complete.

    Raises:
        FileNotFoundError: If a local template directory does not exist
        GitCommandError: If cloning a remote template fails
    """
    output_dir = Path(output_dir)
    if is_local_template(descriptor.location):
        source = resolve_location(descriptor.location, root)
        logger.debug("Copying %s -> %s", source, output_dir)
        _copy_local(source, output_dir)
    else:
        logger.debug("Cloning %s -> %s", descriptor.location, output_dir)
        _clone_remote(descriptor.location, output_dir)


def _copy_local(source: Path, output_dir: Path) -> None:
    if not source.is_dir():
        raise FileNotFoundError(f"Template directory not found: {source}")
    shutil.copytree(source, output_dir, dirs_exist_ok=True)


def _clone_remote(url: str, output_dir: Path) -> None:
    # git refuses to clone into a non-empty directory
    if output_dir.exists():
        shutil.rmtree(output_dir)
    clone_shallow(url, output_dir)
