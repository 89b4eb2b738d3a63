"""Language server installers."""

import logging
from typing import Optional

from ..config.assets import url_maker
from ..config.models import (
    InstallerConfig,
    PackageManagerServer,
    ReleaseArchiveServer,
    ToolchainServer,
)
from .base import BaseInstaller, InstallationError, force_symlink
from .npm import PackageManagerInstaller
from .release import ReleaseArchiveInstaller
from .toolchain import ToolchainInstaller

logger = logging.getLogger(__name__)


def build_installer(
    language: str, server, config: InstallerConfig
) -> Optional[BaseInstaller]:
    """Build the installer for ``language``, or None if it cannot be resolved."""
    settings = config.settings

    if isinstance(server, PackageManagerServer):
        return PackageManagerInstaller(language, server, settings)

    if isinstance(server, ReleaseArchiveServer):
        if not server.source_path or not server.link_target:
            logger.debug(f"Skipping {language}: no source_path/link_target")
            return None
        url = url_maker(language, config.assets)
        if url is None:
            logger.debug(f"Skipping {language}: no release asset")
            return None
        return ReleaseArchiveInstaller(language, server, url, settings)

    if isinstance(server, ToolchainServer):
        return ToolchainInstaller(language, server, settings)

    raise TypeError(f"Unsupported server descriptor: {type(server).__name__}")


__all__ = [
    "BaseInstaller",
    "InstallationError",
    "PackageManagerInstaller",
    "ReleaseArchiveInstaller",
    "ToolchainInstaller",
    "build_installer",
    "force_symlink",
]
