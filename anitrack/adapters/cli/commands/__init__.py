"""Sous-package CLI commands - re-exporte les commandes publiques."""

from anitrack.adapters.cli.commands.library_commands import scan
from anitrack.adapters.cli.commands.parsing_commands import analyze, folder, parse
from anitrack.adapters.cli.commands.search_commands import query, rank

__all__ = [
    "analyze",
    "folder",
    "parse",
    "query",
    "rank",
    "scan",
]
