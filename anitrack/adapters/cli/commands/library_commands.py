"""
Commande CLI de scan de la bibliotheque locale.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from anitrack.adapters.cli.helpers import console, suppress_loguru, with_container


def scan(
    directories: Annotated[
        Optional[list[Path]],
        typer.Argument(help="Repertoires a scanner (defaut : media_dirs de la configuration)"),
    ] = None,
) -> None:
    """Liste les series trouvees dans la bibliotheque."""
    _scan(directories)


@with_container
def _scan(container, directories: Optional[list[Path]]) -> None:
    """Implementation de la commande scan."""
    dirs = directories or container.config().media_dirs
    scanner = container.library_scanner()

    with suppress_loguru():
        shows = scanner.scan_all(dirs)

    if not shows:
        console.print("[yellow]Aucune serie trouvee.[/yellow]")
        return

    table = Table(title=f"Bibliotheque ({len(shows)} series)")
    table.add_column("Serie", overflow="fold")
    table.add_column("Episodes", justify="right")
    table.add_column("Saisons", justify="right")
    table.add_column("Speciaux", justify="right")

    for show in shows:
        table.add_row(
            escape(show.title),
            str(show.episode_count()),
            str(len(show.seasons)),
            str(len(show.specials)),
        )

    console.print(table)
