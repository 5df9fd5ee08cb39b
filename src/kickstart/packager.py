"""Package manager abstraction used to install project dependencies."""

import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from kickstart.errors import KickstartError

logger = logging.getLogger(__name__)


class PackagerError(KickstartError):
    """Base exception for package manager failures."""
    pass


class UnknownPackagerError(PackagerError):
    """No package manager is registered under the requested id."""
    pass


class PackagerNotInstalledError(PackagerError):
    """The package manager binary is not in PATH."""
    pass


class PackagerCommandError(PackagerError):
    """The package manager exited with a non-zero status."""

    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


class Packager:
    """Runs a package manager's install command in a project."""

    binary = ""
    frozen_flag = ""

    def install_command(self, options: Optional[dict] = None) -> List[str]:
        options = options or {}
        cmd = [self.binary, "install"]
        if options.get("frozen_lockfile") and self.frozen_flag:
            cmd.append(self.frozen_flag)
        return cmd

    def install(self, target_dir: Path, options: Optional[dict] = None) -> None:
        """Install dependencies of the project in ``target_dir``.

        Output is inherited so the user sees the package manager's
        own progress.

        Raises:
            PackagerNotInstalledError: If the binary is missing
            PackagerCommandError: If the install fails
        """
        cmd = self.install_command(options)
        cmd_str = " ".join(cmd)
        logger.debug("Running %s in %s", cmd_str, target_dir)
        try:
            result = subprocess.run(cmd, cwd=str(target_dir))
        except FileNotFoundError:
            raise PackagerNotInstalledError(f"{self.binary} is not installed or not in PATH")
        if result.returncode != 0:
            raise PackagerCommandError(
                f"Command failed: {cmd_str} (exit {result.returncode})",
                returncode=result.returncode,
            )


class NpmPackager(Packager):
    binary = "npm"


class YarnPackager(Packager):
    binary = "yarn"
    frozen_flag = "--frozen-lockfile"


class PnpmPackager(Packager):
    binary = "pnpm"
    frozen_flag = "--frozen-lockfile"


PACKAGERS: Dict[str, type] = {
    "npm": NpmPackager,
    "yarn": YarnPackager,
    "pnpm": PnpmPackager,
}


def get_packager(packager_id: str) -> Packager:
    """Get the package manager registered under ``packager_id``."""
    try:
        return PACKAGERS[packager_id]()
    except KeyError:
        raise UnknownPackagerError(
            f"Unknown package manager: {packager_id}. Available: {list(PACKAGERS.keys())}"
        )
