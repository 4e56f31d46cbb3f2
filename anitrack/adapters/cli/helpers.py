"""
Utilitaires partages pour les commandes CLI d'AniTrack.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour couper les logs pendant un affichage Rich
- with_container : decorateur injectant un container en premier argument
- format_optional : affichage d'une valeur eventuellement absente
"""

from contextlib import contextmanager
from functools import wraps
from typing import Optional

from loguru import logger as loguru_logger
from rich.console import Console

from anitrack.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(table)
    """
    loguru_logger.disable("anitrack")
    try:
        yield
    finally:
        loguru_logger.enable("anitrack")


def with_container(func):
    """
    Decorateur qui injecte un container neuf en premier argument.

    Usage:
        @with_container
        def _my_command(container, ...):
            analyzer = container.batch_analyzer()
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(Container(), *args, **kwargs)
    return wrapper


def format_optional(value: Optional[object]) -> str:
    """Valeur ou tiret grise si absente."""
    return "[dim]-[/dim]" if value is None else str(value)
