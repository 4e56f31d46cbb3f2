"""
Point d'entree CLI d'AniTrack.

Commandes de diagnostic du moteur d'identification : parsing de noms,
categorisation de dossiers, analyse de lots, requetes, classement et scan.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import analyze, folder, parse, query, rank, scan
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_for_verbosity

app = typer.Typer(
    name="anitrack",
    help="Identification d'episodes et resolution de requetes pour bibliotheque d'anime",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """AniTrack - diagnostic du parsing et de la recherche."""
    if verbose or quiet:
        settings = get_config()
        configure_logging(
            log_level=level_for_verbosity(verbose, quiet, default=settings.log_level),
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
        )


app.command()(parse)
app.command()(folder)
app.command()(analyze)
app.command()(query)
app.command()(rank)
app.command()(scan)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo("Bibliotheque :")
    for directory in config.media_dirs:
        typer.echo(f"  {directory}")
    typer.echo(f"Seuil batch : {config.batch_min_videos} videos")
    typer.echo(
        f"Recherche : {config.search_target_results} resultats vises, "
        f"{config.search_max_results} maximum"
    )
    typer.echo(f"Taille batch : {config.batch_size_threshold_mb:g} MiB")
    typer.echo(f"Seuil de rapprochement : {config.show_match_threshold}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"AniTrack v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.debug(f"Demarrage d'AniTrack v{__version__}")

    app()


if __name__ == "__main__":
    main()
