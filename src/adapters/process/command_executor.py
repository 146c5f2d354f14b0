"""
Execution des outils externes (ffmpeg, ffprobe) via subprocess.
"""

import shutil
import subprocess
from typing import Optional

from loguru import logger

from src.core.errors import ProcessError
from src.core.ports.parser import ICommandExecutor


class SubprocessCommandExecutor(ICommandExecutor):
    """
    Implementation de ICommandExecutor basee sur subprocess.run.

    Les arguments sont passes sous forme de liste (pas de shell), la sortie
    standard est decodee en UTF-8 et decoupee en lignes.
    """

    def __init__(self, timeout_seconds: Optional[float] = 60.0) -> None:
        """
        Args:
            timeout_seconds: Delai maximum par invocation (None = illimite)
        """
        self._timeout = timeout_seconds

    def is_available(self, tool: str) -> bool:
        """Verifie si l'outil est present dans le PATH."""
        return shutil.which(tool) is not None

    def execute(self, tool: str, arguments: list[str]) -> list[str]:
        """Execute l'outil et retourne les lignes de stdout."""
        cmd = [tool, *arguments]
        logger.debug("Execution commande", command=" ".join(cmd))

        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ProcessError(tool, "executable introuvable") from e
        except subprocess.TimeoutExpired as e:
            raise ProcessError(tool, f"delai depasse ({self._timeout}s)") from e
        except OSError as e:
            raise ProcessError(tool, str(e)) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise ProcessError(
                tool,
                stderr.splitlines()[-1] if stderr else "code retour non nul",
                returncode=completed.returncode,
            )

        return completed.stdout.decode("utf-8", errors="replace").splitlines()
