"""
Interface port pour l'extraction des metadonnees techniques.

Interface abstraite (port) definissant le contrat d'extraction de la
resolution d'un fichier video via mediainfo.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from src.core.value_objects.media_info import Resolution


class IMediaInfoExtractor(ABC):
    """
    Interface pour l'extraction de la resolution d'un fichier video.
    """

    @abstractmethod
    def extract_resolution(self, file_path: Path) -> Optional[Resolution]:
        """
        Extrait la resolution de la premiere piste video.

        Args:
            file_path: Chemin complet vers le fichier video

        Retourne:
            Resolution, ou None si l'extraction echoue
            (fichier non video, corrompu, sans piste video)
        """
        ...
