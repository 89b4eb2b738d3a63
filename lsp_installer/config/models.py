"""Configuration data models."""

import os
from pathlib import Path
from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def expand_path(value: Union[str, Path]) -> Path:
    """Expand ``~`` and environment variables in a path."""
    return Path(os.path.expandvars(os.path.expanduser(str(value))))


class AssetDescriptor(BaseModel):
    """Release asset published on GitHub."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str
    tag: str
    os: str
    filename: str  # {{NAME}}, {{TAG}} and {{OS}} placeholders


class PackageManagerServer(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["package-manager"] = "package-manager"
    package: str
    bin: Optional[str] = None  # None means same as package

    @property
    def bin_name(self) -> str:
        return self.bin or self.package


class ReleaseArchiveServer(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["release-archive"] = "release-archive"
    package: str
    source_path: Optional[str] = None  # relative to root_dir
    link_target: Optional[str] = None  # relative to bin_dir


class ToolchainServer(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["toolchain"] = "toolchain"
    package: str
    toolchain: str = "go"


ServerDescriptor = Annotated[
    Union[PackageManagerServer, ReleaseArchiveServer, ToolchainServer],
    Field(discriminator="mode"),
]


def default_root_dir() -> Path:
    return expand_path("~/.local/share/lsp-installer")


def default_bin_dir() -> Path:
    return expand_path("~/.local/bin")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(default_factory=default_root_dir)
    bin_dir: Path = Field(default_factory=default_bin_dir)
    package_manager: str = "npm"
    log_level: Literal["debug", "info", "warning", "error"] = "info"
    request_timeout: Optional[float] = None  # seconds, None disables

    @field_validator("root_dir", "bin_dir", mode="before")
    @classmethod
    def _expand(cls, value):
        return expand_path(value)

    def resolve_source(self, source_path: str) -> Path:
        path = expand_path(source_path)
        return path if path.is_absolute() else self.root_dir / path

    def resolve_target(self, link_target: str) -> Path:
        path = expand_path(link_target)
        return path if path.is_absolute() else self.bin_dir / path


class InstallerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    settings: Settings = Field(default_factory=Settings)
    servers: Dict[str, ServerDescriptor] = Field(default_factory=dict)
    assets: Dict[str, AssetDescriptor] = Field(default_factory=dict)

    @field_validator("assets", mode="before")
    @classmethod
    def _upper_asset_keys(cls, value):
        if isinstance(value, dict):
            return {str(key).upper(): asset for key, asset in value.items()}
        return value
