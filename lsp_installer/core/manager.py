"""Resolves requested languages to installers and runs them."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List

from ..config.models import InstallerConfig
from ..installers import BaseInstaller, build_installer

logger = logging.getLogger(__name__)

ALL = "all"


class Operation(str, Enum):
    INSTALL = "install"
    UPDATE = "update"


@dataclass
class InstallReport:
    """Outcome of one run, per language."""

    succeeded: List[str] = field(default_factory=list)
    failed: Dict[str, BaseException] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class InstallManager:
    """Builds installers from the registries and runs them concurrently."""

    def __init__(self, config: InstallerConfig):
        self.config = config

    def expand(self, languages: Iterable[str]) -> List[str]:
        """Expand ``all`` and drop duplicates, keeping first-seen order."""
        expanded: Dict[str, None] = {}
        for language in languages:
            if language == ALL:
                expanded.update(dict.fromkeys(self.config.servers))
            else:
                expanded[language] = None
        return list(expanded)

    def resolve(self, languages: Iterable[str]) -> List[BaseInstaller]:
        """Build one installer per resolvable language; unknown names are skipped."""
        installers = []
        for language in self.expand(languages):
            server = self.config.servers.get(language)
            if server is None:
                logger.debug(f"Unknown language: {language}")
                continue
            installer = build_installer(language, server, self.config)
            if installer is not None:
                installers.append(installer)
        return installers

    async def run(
        self, operation: Operation, installers: List[BaseInstaller]
    ) -> InstallReport:
        """Run ``operation`` on every installer concurrently and collect failures."""
        operation = Operation(operation)
        logger.info(
            f"Running {operation.value} for "
            f"{', '.join(i.language for i in installers)}"
        )
        results = await asyncio.gather(
            *(getattr(installer, operation.value)() for installer in installers),
            return_exceptions=True,
        )

        report = InstallReport()
        for installer, result in zip(installers, results):
            if isinstance(result, BaseException):
                logger.error(f"{operation.value} failed for {installer.language}: {result}")
                report.failed[installer.language] = result
            else:
                report.succeeded.append(installer.language)
        return report

