"""
Commandes CLI de diagnostic de la recherche : generation des requetes et
classement de titres.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from anitrack.adapters.cli.helpers import console, format_optional
from anitrack.services.query_parser import parse_query
from anitrack.services.ranker import score_candidates
from anitrack.services.search_query import build_search_query


def query(
    text: Annotated[str, typer.Argument(help="Requete libre, ex: \"Frieren S01E09\"")],
) -> None:
    """Affiche la decomposition d'une requete et les chaines de recherche generees."""
    search_query = build_search_query(text)
    parsed = search_query.parsed

    console.print(f"[bold]Serie[/bold] : {escape(parsed.show_name) or '[dim]-[/dim]'}")
    console.print(f"[bold]Saison[/bold] : {format_optional(parsed.season)}")
    console.print(f"[bold]Episode[/bold] : {format_optional(parsed.episode)}")
    console.print(f"[bold]Batch[/bold] : {'oui' if parsed.is_batch_request else 'non'}")

    table = Table(title="Requetes")
    table.add_column("#", justify="right")
    table.add_column("Requete")
    for index, candidate in enumerate(search_query.all_queries(), start=1):
        table.add_row(
            str(index), escape(candidate), style="bold green" if index == 1 else None
        )

    console.print(table)


def rank(
    text: Annotated[str, typer.Argument(help="Requete libre")],
    titles: Annotated[
        Optional[list[str]],
        typer.Argument(help="Titres a classer"),
    ] = None,
    titles_file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Fichier texte, un titre par ligne"),
    ] = None,
) -> None:
    """Classe des titres de releases par pertinence pour une requete."""
    candidates = list(titles or [])
    if titles_file is not None:
        try:
            lines = titles_file.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            console.print(f"[red]Lecture impossible de {titles_file}: {e}[/red]")
            raise typer.Exit(code=1)
        candidates.extend(line.strip() for line in lines if line.strip())

    if not candidates:
        console.print("[yellow]Aucun titre a classer.[/yellow]")
        raise typer.Exit(code=1)

    parsed = parse_query(text)
    scored = score_candidates(candidates, parsed, get_title=str)
    scored.sort(key=lambda c: c.score, reverse=True)

    table = Table(title=f"Classement pour \"{escape(parsed.raw_query)}\"")
    table.add_column("Score", justify="right")
    table.add_column("Titre", overflow="fold")
    for candidate in scored:
        color = "green" if candidate.score > 0 else "red"
        table.add_row(f"[{color}]{candidate.score}[/{color}]", escape(candidate.title))

    console.print(table)
