"""Base installer interface."""

import asyncio
import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..config.models import Settings

logger = logging.getLogger(__name__)


class InstallationError(Exception):
    """Raised when installation fails."""

    pass


def force_symlink(src: Path, target: Path) -> None:
    """Point ``target`` at ``src``, replacing whatever is there (``ln -fsn``)."""
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_link = target.with_name(f".{target.name}.{os.getpid()}.tmp")
    tmp_link.unlink(missing_ok=True)
    tmp_link.symlink_to(src)
    os.replace(tmp_link, target)
    logger.debug(f"Linked {target} -> {src}")


class BaseInstaller(ABC):
    """Install and update operations for one language's server."""

    def __init__(self, language: str, settings: Settings):
        self.language = language
        self.settings = settings

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.language!r})"

    @abstractmethod
    async def install(self) -> None:
        """Install the server."""
        pass

    @abstractmethod
    async def update(self) -> None:
        """Update an installed server."""
        pass

    async def _run_command(
        self, cmd: list, cwd: Optional[Path] = None, env: Optional[Dict] = None
    ) -> subprocess.CompletedProcess:
        """Run a command asynchronously."""
        logger.debug(f"Running command: {' '.join(cmd)} in {cwd}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=cwd,
                env=env,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise InstallationError(
                f"Cannot run {cmd[0]}: command or working directory {cwd} not found"
            ) from e

        stdout, stderr = await process.communicate()

        if process.returncode != 0:
            error_msg = f"Command failed: {' '.join(cmd)}\nStdout: {stdout.decode()}\nStderr: {stderr.decode()}"
            logger.error(error_msg)
            raise InstallationError(error_msg)

        return subprocess.CompletedProcess(
            args=cmd, returncode=process.returncode, stdout=stdout, stderr=stderr
        )
