"""
Commandes CLI de diagnostic du parsing : noms de fichiers, dossiers, lots.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from anitrack.adapters.cli.helpers import console, format_optional, with_container
from anitrack.core.value_objects import BatchAnalysis
from anitrack.services.filename_parser import parse_filename
from anitrack.services.folder_categorizer import categorize_folder


def parse(
    filenames: Annotated[
        list[str],
        typer.Argument(help="Noms de fichiers ou titres de releases"),
    ],
) -> None:
    """Affiche episode, saison, groupe et qualite extraits de chaque nom."""
    table = Table(title="Parsing")
    table.add_column("Nom", overflow="fold")
    table.add_column("Ep.", justify="right")
    table.add_column("Saison", justify="right")
    table.add_column("Groupe")
    table.add_column("Qualite")

    for filename in filenames:
        parsed = parse_filename(filename)
        table.add_row(
            escape(filename),
            format_optional(parsed.episode),
            format_optional(parsed.season),
            format_optional(parsed.release_group and escape(parsed.release_group)),
            format_optional(parsed.quality),
        )

    console.print(table)


def folder(
    names: Annotated[
        list[str],
        typer.Argument(help="Noms de dossiers"),
    ],
) -> None:
    """Affiche la categorie de chaque nom de dossier."""
    table = Table(title="Categories")
    table.add_column("Dossier", overflow="fold")
    table.add_column("Categorie")

    for name in names:
        category = categorize_folder(name)
        style = "dim" if category.is_unknown else "green"
        table.add_row(escape(name), f"[{style}]{category}[/{style}]")

    console.print(table)


def analyze(
    path: Annotated[
        Path,
        typer.Argument(help="Dossier (ou fichier video) telecharge"),
    ],
) -> None:
    """Inventorie un telechargement : saisons, speciaux, episodes en vrac."""
    _analyze(path)


@with_container
def _analyze(container, path: Path) -> None:
    """Implementation de la commande analyze."""
    analysis = container.batch_analyzer().analyze(path)

    if analysis.total_videos == 0:
        console.print(f"[yellow]Aucune video trouvee dans {escape(str(path))}[/yellow]")
        raise typer.Exit(code=1)

    console.print(_analysis_tree(path, analysis))
    kind = "batch" if analysis.is_batch else "episode isole"
    console.print(
        f"\n[bold]{analysis.summary()}[/bold] "
        f"({analysis.total_videos} videos, {kind})"
    )


def _analysis_tree(path: Path, analysis: BatchAnalysis) -> Tree:
    """Arbre Rich d'une analyse."""
    tree = Tree(f"[bold cyan]{escape(path.name or str(path))}[/bold cyan]")

    for season in analysis.seasons:
        branch = tree.add(
            f"[green]Season {season.number}[/green] "
            f"[dim]({escape(season.folder_name)}, {len(season.episodes)} episodes)[/dim]"
        )
        for episode in season.episodes:
            branch.add(escape(episode.name))

    buckets = (
        ("OVA", analysis.specials.ovas),
        ("Movies", analysis.specials.movies),
        ("Specials", analysis.specials.specials),
        ("Episodes", analysis.loose_episodes),
    )
    for label, files in buckets:
        if not files:
            continue
        branch = tree.add(f"[magenta]{label}[/magenta] [dim]({len(files)})[/dim]")
        for file in files:
            branch.add(escape(file.name))

    return tree
