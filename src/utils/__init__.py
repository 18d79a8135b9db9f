"""
Utilitaires et constantes pour media-scanner.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import (
    ACCEPTED_FILE_TYPES,
    IGNORED_PATTERNS,
    RESOLUTION_LABELS,
)
from src.utils.helpers import normalize_extension

__all__ = [
    "ACCEPTED_FILE_TYPES",
    "IGNORED_PATTERNS",
    "RESOLUTION_LABELS",
    "normalize_extension",
]
