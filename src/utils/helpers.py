"""
Fonctions utilitaires partagees dans le projet media-scanner.

Ce module centralise les fonctions reutilisees a travers le codebase :
- normalize_extension : extension comparable a ACCEPTED_FILE_TYPES
- is_ignored_filename : detection des samples, trailers et extras
"""

from pathlib import Path

from src.utils.constants import IGNORED_PATTERNS


def normalize_extension(path: str | Path) -> str:
    """
    Retourne l'extension d'un fichier en minuscules, sans le point initial.

    Les systemes de fichiers conservent la casse des extensions (".MKV",
    ".Mp4"), alors que les types acceptes sont stockes en minuscules.

    Exemples :
        "Film.MKV" -> "mkv"
        "archive" -> ""
    """
    return Path(path).suffix.lower().lstrip(".")


def is_ignored_filename(path: str | Path) -> bool:
    """Verifie si le nom de fichier contient un pattern ignore (insensible a la casse)."""
    filename_lower = Path(path).name.lower()
    return any(pattern in filename_lower for pattern in IGNORED_PATTERNS)
