"""Release-archive installer: download, extract, link."""

import asyncio
import logging
import os
import tarfile
import tempfile
from pathlib import Path
from typing import Optional

import httpx

from ..config.models import ReleaseArchiveServer, Settings
from .base import BaseInstaller, InstallationError, force_symlink

logger = logging.getLogger(__name__)


class ReleaseArchiveInstaller(BaseInstaller):
    """Installer for servers shipped as GitHub release tarballs."""

    def __init__(
        self,
        language: str,
        server: ReleaseArchiveServer,
        url: str,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(language, settings)
        self.package = server.package
        self.url = url
        self.source = settings.resolve_source(server.source_path)
        self.target = settings.resolve_target(server.link_target)
        self.transport = transport

    @property
    def extract_dir(self) -> Path:
        return self.settings.root_dir / self.language

    async def install(self) -> None:
        await self.fetch()

    async def update(self) -> None:
        await self.fetch(force=True)

    async def fetch(self, force: bool = False) -> None:
        """Download and unpack the archive unless present, then link the binary."""
        if force or not self.source.exists():
            logger.info(f"Installing {self.package} from {self.url}")
            fd, tmp_name = tempfile.mkstemp(prefix=f"{self.language}-", suffix=".tar.gz")
            os.close(fd)
            archive = Path(tmp_name)
            try:
                await self._download(archive)
                self.extract_dir.mkdir(parents=True, exist_ok=True)
                await asyncio.to_thread(self._extract, archive, self.extract_dir)
            finally:
                archive.unlink(missing_ok=True)
        else:
            logger.info(f"{self.package} already present at {self.source}")

        force_symlink(self.source, self.target)
        logger.info(f"{self.package} linked at {self.target}")

    async def _download(self, destination: Path) -> None:
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=self.settings.request_timeout,
            transport=self.transport,
        ) as client:
            async with client.stream("GET", self.url) as response:
                response.raise_for_status()
                with open(destination, "wb") as f:
                    async for chunk in response.aiter_bytes():
                        await asyncio.to_thread(f.write, chunk)
        logger.debug(f"Downloaded {self.url} to {destination}")

    @staticmethod
    def _extract(archive: Path, destination: Path) -> None:
        try:
            with tarfile.open(archive, "r:*") as tf:
                tf.extractall(destination, filter="tar")
        except tarfile.TarError as e:
            raise InstallationError(f"Failed to extract {archive}: {e}") from e
