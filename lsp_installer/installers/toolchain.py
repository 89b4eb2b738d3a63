"""Toolchain (``go install``) based installer."""

import logging

from ..config.models import Settings, ToolchainServer
from .base import BaseInstaller

logger = logging.getLogger(__name__)


class ToolchainInstaller(BaseInstaller):
    """Delegates to the toolchain's own "install latest" command.

    The toolchain keeps its own module cache, so install and update are the
    same operation.
    """

    def __init__(self, language: str, server: ToolchainServer, settings: Settings):
        super().__init__(language, settings)
        self.package = server.package
        self.toolchain = server.toolchain

    @property
    def command(self) -> list:
        return [self.toolchain, "install", f"{self.package}@latest"]

    async def install(self) -> None:
        logger.info(f"Installing {self.package} with {self.toolchain}")
        await self._run_command(self.command)
        logger.info(f"{self.package} installed")

    update = install
