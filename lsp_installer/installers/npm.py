"""Package-manager (npm) based installer."""

import json
import logging
from pathlib import Path

from ..config.models import PackageManagerServer, Settings
from .base import BaseInstaller, InstallationError, force_symlink

logger = logging.getLogger(__name__)


class PackageManagerInstaller(BaseInstaller):
    """Installs a server as a dev dependency under ``root_dir``."""

    def __init__(self, language: str, server: PackageManagerServer, settings: Settings):
        super().__init__(language, settings)
        self.package = server.package
        self.bin_name = server.bin_name

    @property
    def shim_path(self) -> Path:
        return self.settings.root_dir / "node_modules" / ".bin" / self.bin_name

    @property
    def link_path(self) -> Path:
        return self.settings.bin_dir / self.bin_name

    async def install(self) -> None:
        if self.shim_path.exists():
            logger.info(f"{self.package} already installed, relinking {self.bin_name}")
        else:
            logger.info(f"Installing npm package: {self.package}")
            self._ensure_project()
            await self._run_command(
                [self.settings.package_manager, "install", "-D", self.package],
                cwd=self.settings.root_dir,
            )
            if not self.shim_path.exists():
                raise InstallationError(
                    f"{self.package} installed but {self.shim_path} is missing"
                )
        force_symlink(self.shim_path, self.link_path)
        logger.info(f"npm package {self.package} installed as {self.link_path}")

    async def update(self) -> None:
        logger.info(f"Updating npm package: {self.package}")
        self._ensure_project()
        await self._run_command(
            [self.settings.package_manager, "update", "-D", self.package],
            cwd=self.settings.root_dir,
        )

    def _ensure_project(self) -> None:
        """Create ``root_dir/package.json`` so npm does not pick an ancestor project."""
        root_dir = self.settings.root_dir
        root_dir.mkdir(parents=True, exist_ok=True)
        package_json = root_dir / "package.json"
        if package_json.exists():
            return

        with open(package_json, "w") as f:
            json.dump({"name": "lsp-installer-servers", "private": True}, f, indent=2)
        logger.debug(f"Created {package_json}")
