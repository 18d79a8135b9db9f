"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete des collaborateurs du workflow qui touchent au disque :
- IDirectoryScanner : liste des repertoires de la bibliotheque source
- IPermissionChecker : tri des repertoires selon les droits d'acces
- IFileMover : deplacement atomique vers la bibliotheque de destination

Les operations bloquantes s'executent dans un thread (asyncio.to_thread) :
seul leur resultat revient dans la boucle de l'orchestrateur.
"""

import asyncio
import os
import shutil
import uuid
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from src.core.exceptions import MoveError, PermissionCheckError, ScanError
from src.core.ports.workflow import IDirectoryScanner, IFileMover, IPermissionChecker
from src.core.value_objects.workflow import PermissionCheckResult

# Droits requis pour evaluer puis deplacer le contenu d'un repertoire
REQUIRED_ACCESS: int = os.R_OK | os.W_OK | os.X_OK


class FileSystemAdapter(IDirectoryScanner, IPermissionChecker, IFileMover):
    """
    Implementation des collaborateurs disque du workflow.

    Les methodes async deleguent a des methodes synchrones, testables
    directement et executees dans un thread.
    """

    # Implementation de IDirectoryScanner

    async def scan_directories(self, base_path: str) -> list[str]:
        """Liste les repertoires de la bibliotheque source."""
        return await asyncio.to_thread(self.list_directories, Path(base_path))

    def list_directories(self, base_path: Path) -> list[str]:
        """
        Liste la racine et tous ses sous-repertoires (recursif).

        Les liens symboliques sont ignores. Un sous-repertoire illisible est
        tout de meme liste : la verification des permissions le signalera.

        Args:
            base_path: Racine de la bibliotheque source

        Returns:
            Chemins tries, racine comprise

        Raises:
            ScanError: Si la racine n'existe pas, n'est pas un repertoire
                       ou n'est pas lisible
        """
        if not base_path.is_dir():
            raise ScanError(str(base_path), "repertoire introuvable")
        if not os.access(base_path, os.R_OK | os.X_OK):
            raise ScanError(str(base_path), "lecture refusee")

        directories = [base_path]
        try:
            for path in base_path.rglob("*"):
                if path.is_symlink():
                    continue
                if path.is_dir():
                    directories.append(path)
        except OSError as e:
            raise ScanError(str(base_path), str(e)) from e

        logger.debug("{} repertoire(s) trouve(s) sous {}", len(directories), base_path)
        return sorted(str(directory) for directory in directories)

    # Implementation de IPermissionChecker

    async def check_file_permissions(
        self, directories: Sequence[str]
    ) -> PermissionCheckResult:
        """Trie les repertoires selon leurs droits lecture/ecriture."""
        return await asyncio.to_thread(self.split_by_access, list(directories))

    def split_by_access(self, directories: Sequence[str]) -> PermissionCheckResult:
        """
        Separe les repertoires exploitables de ceux a signaler.

        Args:
            directories: Repertoires issus du scan

        Returns:
            PermissionCheckResult (vide si aucun repertoire en entree)

        Raises:
            PermissionCheckError: Si aucun repertoire n'est exploitable
        """
        dirs_to_evaluate: list[str] = []
        dirs_to_report: list[str] = []

        for directory in directories:
            if self.has_required_access(Path(directory)):
                dirs_to_evaluate.append(str(directory))
            else:
                dirs_to_report.append(str(directory))

        if dirs_to_report:
            logger.warning(
                "{} repertoire(s) sans droits lecture/ecriture", len(dirs_to_report)
            )
        if dirs_to_report and not dirs_to_evaluate:
            raise PermissionCheckError(dirs_to_report)

        return PermissionCheckResult(
            dirs_to_evaluate=tuple(dirs_to_evaluate),
            dirs_to_report=tuple(dirs_to_report),
        )

    @staticmethod
    def has_required_access(path: Path) -> bool:
        """Verifie que le chemin est un repertoire lisible, modifiable et traversable."""
        return path.is_dir() and os.access(path, REQUIRED_ACCESS)

    # Implementation de IFileMover

    async def move_files(self, files: Sequence[str], destination_path: str) -> None:
        """Deplace les fichiers vers la racine de destination."""
        await asyncio.to_thread(self.move_to_destination, list(files), Path(destination_path))

    def move_to_destination(self, files: Sequence[str], destination: Path) -> None:
        """
        Deplace chaque fichier a la racine de destination.

        Un fichier deja present a destination n'est jamais ecrase : c'est
        une collision, comptee comme un echec. Tous les fichiers sont tentes
        avant de signaler les echecs.

        Raises:
            MoveError: Si la destination est inutilisable ou si un deplacement echoue
        """
        if not files:
            return

        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MoveError(files, f"destination inutilisable: {e}") from e

        failed: list[str] = []
        for file in files:
            source = Path(file)
            target = destination / source.name

            if target.exists():
                logger.warning("Collision a destination, fichier conserve: {}", source)
                failed.append(str(file))
                continue

            if self.atomic_move(source, target):
                logger.info("Deplace: {} -> {}", source, target)
            else:
                failed.append(str(file))

        if failed:
            raise MoveError(failed)

    def atomic_move(self, source: Path, destination: Path) -> bool:
        """
        Deplace un fichier de maniere atomique.

        Utilise os.replace pour un deplacement atomique sur le meme filesystem.
        Pour un deplacement cross-filesystem, utilise une copie intermediaire
        avec un fichier temporaire pour garantir l'atomicite.

        Args:
            source: Chemin du fichier source
            destination: Chemin de destination

        Returns:
            True si le deplacement a reussi, False sinon.
        """
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)

            try:
                os.replace(source, destination)
            except OSError:
                if not source.is_file():
                    raise
                # Cross-filesystem: copie vers un nom temporaire unique puis rename
                temp = destination.with_name(f".tmp_{uuid.uuid4().hex}_{destination.name}")
                try:
                    shutil.copy2(source, temp)
                    os.replace(temp, destination)
                    source.unlink()
                except Exception:
                    if temp.exists():
                        temp.unlink()
                    raise

            return True
        except Exception as e:
            logger.error("Echec du deplacement de {}: {}", source, e)
            return False
