"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports du workflow : Collaborateurs consommés par l'orchestrateur
- IDirectoryScanner : Découverte des répertoires candidats
- IPermissionChecker : Vérification des droits lecture/écriture
- IFileEvaluator : Sélection des fichiers à déplacer
- IFileMover : Déplacement vers la bibliothèque de destination
- IErrorNotifier : Notification des erreurs à l'opérateur

Ports métadonnées : Contrats pour mediainfo
- IMediaInfoExtractor : Extraction de la résolution
"""

from src.core.ports.media_info import IMediaInfoExtractor
from src.core.ports.workflow import (
    IDirectoryScanner,
    IErrorNotifier,
    IFileEvaluator,
    IFileMover,
    IPermissionChecker,
)

__all__ = [
    # Workflow
    "IDirectoryScanner",
    "IPermissionChecker",
    "IFileEvaluator",
    "IFileMover",
    "IErrorNotifier",
    # Métadonnées
    "IMediaInfoExtractor",
]
