"""
Service d'evaluation des fichiers media.

Selectionne, dans les repertoires autorises, les fichiers a deplacer vers la
bibliotheque de destination : extension acceptee et resolution au moins
egale au palier configure (4K par defaut).
"""

import asyncio
from collections.abc import Iterator, Sequence, Set
from pathlib import Path

from loguru import logger

from src.core.exceptions import EvaluationError
from src.core.ports.media_info import IMediaInfoExtractor
from src.core.ports.workflow import IFileEvaluator
from src.core.value_objects.workflow import EvaluationResult
from src.utils.helpers import is_ignored_filename, normalize_extension


class FileEvaluatorService(IFileEvaluator):
    """
    Service d'evaluation des fichiers candidats au deplacement.

    Coordonne:
    - Le filtrage par type de fichier (insensible a la casse)
    - L'extracteur mediainfo (IMediaInfoExtractor) pour la resolution
    """

    def __init__(
        self,
        media_info_extractor: IMediaInfoExtractor,
        min_resolution: str = "4K",
    ) -> None:
        """
        Initialise le service d'evaluation.

        Args:
            media_info_extractor: Implementation de IMediaInfoExtractor
            min_resolution: Palier minimum (SD, 720p, 1080p, 4K)
        """
        self._media_info_extractor = media_info_extractor
        self._min_resolution = min_resolution

    async def evaluate_files(
        self, directories: Sequence[str], accepted_file_types: Set[str]
    ) -> EvaluationResult:
        """Evalue les fichiers dans un thread (mediainfo est bloquant)."""
        return await asyncio.to_thread(
            self.select_files, list(directories), accepted_file_types
        )

    def select_files(
        self, directories: Sequence[str], accepted_file_types: Set[str]
    ) -> EvaluationResult:
        """
        Selectionne les fichiers a deplacer.

        Args:
            directories: Repertoires a evaluer (non recursif, le scan a deja
                         liste les sous-repertoires)
            accepted_file_types: Extensions acceptees

        Returns:
            EvaluationResult, vide si aucun repertoire ou aucun fichier eligible

        Raises:
            EvaluationError: Si un repertoire ne peut pas etre lu
        """
        accepted = {ext.lower().lstrip(".") for ext in accepted_file_types}
        selected: list[str] = []

        for directory in directories:
            for file_path in self._candidate_files(Path(directory), accepted):
                resolution = self._media_info_extractor.extract_resolution(file_path)
                if resolution is None:
                    logger.debug("Resolution inconnue, ignore: {}", file_path)
                    continue
                if resolution.meets(self._min_resolution):
                    selected.append(str(file_path))

        logger.info(
            "{} fichier(s) {} ou plus a deplacer", len(selected), self._min_resolution
        )
        return EvaluationResult(dirs_to_move=tuple(selected))

    def _candidate_files(self, directory: Path, accepted: Set[str]) -> Iterator[Path]:
        """Fichiers reguliers du repertoire dont le type est accepte."""
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            raise EvaluationError(f"Lecture impossible: {directory}") from e

        for path in entries:
            if path.is_symlink() or not path.is_file():
                continue
            if normalize_extension(path) not in accepted:
                continue
            if is_ignored_filename(path):
                continue
            yield path
