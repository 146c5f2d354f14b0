"""
Utilitaires partages pour les commandes CLI de Mediatheque.

Ce module fournit :
- console : instance Rich Console partagee
- build_container : construction du container avec sortie propre en cas
  d'erreur de configuration
"""

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from src.config import Settings
from src.container import Container
from src.core.errors import ConfigurationError

console = Console()


def build_container(max_workers: Optional[int] = None) -> Container:
    """
    Construit le container a partir de l'environnement.

    Une configuration invalide affiche l'erreur et termine avec le code 1.
    """
    try:
        return Container.build(Settings(), max_workers=max_workers)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]Erreur de configuration:[/red] {e}")
        raise typer.Exit(1)
