"""Adaptateurs d'execution des outils externes."""

from src.adapters.process.command_executor import SubprocessCommandExecutor

__all__ = ["SubprocessCommandExecutor"]
