"""Configuration system for the language server installer."""

from .assets import url_maker
from .manager import ConfigManager
from .models import (
    AssetDescriptor,
    InstallerConfig,
    PackageManagerServer,
    ReleaseArchiveServer,
    Settings,
    ToolchainServer,
)

__all__ = [
    "AssetDescriptor",
    "ConfigManager",
    "InstallerConfig",
    "PackageManagerServer",
    "ReleaseArchiveServer",
    "Settings",
    "ToolchainServer",
    "url_maker",
]
