"""
Implementation de l'extracteur de resolution avec pymediainfo.

Ce module fournit MediaInfoExtractor qui implemente IMediaInfoExtractor
pour lire la resolution de la premiere piste video d'un fichier.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from pymediainfo import MediaInfo as PyMediaInfo

from src.core.ports.media_info import IMediaInfoExtractor
from src.core.value_objects.media_info import Resolution


class MediaInfoExtractor(IMediaInfoExtractor):
    """
    Extracteur de resolution utilisant pymediainfo.
    """

    def extract_resolution(self, file_path: Path) -> Optional[Resolution]:
        """
        Extrait la resolution d'un fichier video.

        Args:
            file_path: Chemin complet vers le fichier video

        Returns:
            Resolution, ou None si l'extraction echoue
            (fichier absent, non video, corrompu, etc.)
        """
        if not file_path.exists():
            return None

        try:
            media_info = PyMediaInfo.parse(str(file_path))
        except Exception as e:
            logger.debug("mediainfo illisible pour {}: {}", file_path, e)
            return None

        video_tracks = [
            track for track in media_info.tracks if track.track_type == "Video"
        ]
        return self._extract_resolution(video_tracks)

    def _extract_resolution(self, video_tracks: list) -> Optional[Resolution]:
        """
        Extrait la resolution depuis la premiere piste video.

        Args:
            video_tracks: Liste des pistes video

        Returns:
            Resolution ou None si pas de piste video
        """
        if not video_tracks:
            return None

        track = video_tracks[0]
        width = track.width
        height = track.height

        if width is None or height is None:
            return None

        return Resolution(width=int(width), height=int(height))
