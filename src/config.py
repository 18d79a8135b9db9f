"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
MEDIASCANNER_, et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.constants import RESOLUTION_LABELS

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIASCANNER_.
    Exemple : MEDIASCANNER_MIN_RESOLUTION=1080p

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIASCANNER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Bibliothèques source et destination (avec expansion ~)
    base_path: Path = Field(default=Path("~/Videos/library"))
    destination_path: Path = Field(default=Path("~/Videos/4k"))

    # Évaluation : palier de résolution minimum pour déplacer un fichier
    min_resolution: str = Field(default="4K")

    # Délai maximum d'un effet en secondes (None = pas de limite)
    effect_timeout_seconds: Optional[float] = Field(default=None, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/media-scanner.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("base_path", "destination_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("min_resolution")
    @classmethod
    def check_min_resolution(cls, v: str) -> str:
        """Vérifie que le palier fait partie des libellés connus (casse ignorée)."""
        for label in RESOLUTION_LABELS:
            if label.lower() == v.strip().lower():
                return label
        raise ValueError(
            f"min_resolution doit être l'un de {', '.join(RESOLUTION_LABELS)}"
        )
