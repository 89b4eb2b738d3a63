"""Installer and updater for editor language servers."""

__version__ = "0.1.0"
