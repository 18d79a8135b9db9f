"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Modules :
- file_system.py : Scan, permissions et déplacements sur le disque
- parsing/ : Extraction de la résolution via mediainfo
- notification.py : Signalement des erreurs à l'opérateur

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
Cela permet de changer les implémentations sans affecter la logique métier.
"""

from src.adapters.file_system import FileSystemAdapter
from src.adapters.notification import LoggingErrorNotifier
from src.adapters.parsing.mediainfo_extractor import MediaInfoExtractor

__all__ = [
    "FileSystemAdapter",
    "LoggingErrorNotifier",
    "MediaInfoExtractor",
]
