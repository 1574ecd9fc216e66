"""Package installation through the project's package manager."""

from __future__ import annotations

from pathlib import Path

from src.errors import DependencyInstallError
from src.utils import create_progress, run_command


class PackageInstaller:
    """Runs ``<package_manager> install --save <package>`` in the project.

    Installation blocks until the package manager exits, however long that
    takes, unless a *timeout* in seconds is given.  There are no retries; a
    non-zero exit raises ``DependencyInstallError``.
    """

    def __init__(
        self,
        project_dir: str | Path,
        package_manager: str = "npm",
        timeout: int | None = None,
    ) -> None:
        self.project_dir = Path(project_dir)
        self.package_manager = package_manager
        self.timeout = timeout

    def command(self, package: str) -> list[str]:
        return [self.package_manager, "install", "--save", package]

    async def install(self, package: str, description: str | None = None) -> str:
        """Install *package* and return the package manager's stdout."""
        description = description or f"Installing {package}. Hold on"
        with create_progress() as progress:
            progress.add_task(description, total=None)
            returncode, stdout, stderr = await run_command(
                self.command(package),
                cwd=self.project_dir,
                timeout=self.timeout,
            )
        if returncode != 0:
            raise DependencyInstallError(package, returncode, stderr)
        return stdout
