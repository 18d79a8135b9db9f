"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- Resolution : Resolution video (largeur x hauteur)
- PermissionCheckResult : Repertoires a evaluer / a signaler
- EvaluationResult : Fichiers selectionnes pour le deplacement
"""

from src.core.value_objects.media_info import Resolution
from src.core.value_objects.workflow import EvaluationResult, PermissionCheckResult

__all__ = [
    "Resolution",
    "PermissionCheckResult",
    "EvaluationResult",
]
