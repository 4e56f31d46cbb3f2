"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe ANITRACK_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de anitrack/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe ANITRACK_.
    Exemple : ANITRACK_LOG_LEVEL=DEBUG

    Les listes se passent en JSON :
    ANITRACK_MEDIA_DIRS='["~/Anime", "/mnt/nas/anime"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="ANITRACK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Répertoires de la bibliothèque (un sous-répertoire par série)
    media_dirs: list[Path] = Field(default_factory=lambda: [Path("~/Videos/Anime")])

    # Analyse des lots : nombre de vidéos à partir duquel un dossier est un batch
    batch_min_videos: int = Field(default=4, ge=1)

    # Recherche : arrêt dès que ce nombre de résultats uniques est atteint
    search_target_results: int = Field(default=15, ge=1)
    search_max_results: int = Field(default=30, ge=1)
    # Au-delà de cette taille (MiB) une release est considérée comme un batch
    batch_size_threshold_mb: float = Field(default=5120.0, gt=0)

    # Suivi : score rapidfuzz minimum pour rattacher une série suivie à un show
    show_match_threshold: int = Field(default=90, ge=0, le=100)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/anitrack.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("media_dirs", mode="before")
    @classmethod
    def expand_paths(cls, v: list[str | Path]) -> list[Path]:
        """Étend ~ pour chaque répertoire de la bibliothèque."""
        return [Path(p).expanduser() for p in v]
