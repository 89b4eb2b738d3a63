"""Core orchestration."""

from .manager import ALL, InstallManager, InstallReport, Operation

__all__ = ["ALL", "InstallManager", "InstallReport", "Operation"]
