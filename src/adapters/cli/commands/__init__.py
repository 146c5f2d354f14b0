"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.integrate_commands import (
    integrate,
    plan,
    scan,
    tags,
    xml,
)

__all__ = [
    "integrate",
    "plan",
    "scan",
    "tags",
    "xml",
]
