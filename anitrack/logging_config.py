"""
Configuration du logging de l'application via loguru.

- stderr : lisible, colore, niveau choisi par l'utilisateur (-v / -q)
- fichier : JSON avec rotation ; les decisions d'analyse et de recherche y
  sont tracees en DEBUG
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# -v, -vv : de plus en plus de details sur stderr
_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG")


def level_for_verbosity(verbose: int, quiet: bool, default: str = "WARNING") -> str:
    """
    Niveau console correspondant aux options de la CLI.

    Ex: quiet -> "ERROR", -v -> "INFO", -vv -> "DEBUG", rien -> default
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/anitrack.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les handlers loguru.

    Args :
        log_level : Niveau minimum pour stderr (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON ; None pour ne journaliser que sur stderr
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Logging configure ({log_file}, rotation {rotation_size})")
