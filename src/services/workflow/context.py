"""
Contexte du workflow transporte d'un etat a l'autre.
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from src.utils.constants import ACCEPTED_FILE_TYPES

# Champs fixes a la creation du contexte
_IMMUTABLE_FIELDS = frozenset({"base_path", "destination_path", "accepted_file_types"})


@dataclass(frozen=True)
class WorkflowContext:
    """
    Donnees accumulees par le workflow.

    Le contexte est immutable : chaque transition produit un nouveau contexte
    via with_updates(). Les champs remplis par un etat ne sont lus que par
    l'etat suivant.

    Attributs :
        base_path : Racine de la bibliotheque source
        destination_path : Racine de la bibliotheque de destination
        directories_to_check : Repertoires trouves par le scan
        dirs_to_evaluate : Repertoires autorises en lecture/ecriture
        dirs_to_report : Repertoires/fichiers en echec, a signaler
        dirs_to_move : Fichiers selectionnes pour le deplacement
        files_to_email : Reserve au detail des rapports (jamais rempli)
        processed_files : Reserve a l'audit (jamais rempli)
        accepted_file_types : Extensions media acceptees (minuscules, sans point)
    """

    base_path: str
    destination_path: str
    directories_to_check: tuple[str, ...] = ()
    dirs_to_evaluate: tuple[str, ...] = ()
    dirs_to_report: tuple[str, ...] = ()
    dirs_to_move: tuple[str, ...] = ()
    files_to_email: tuple[str, ...] = ()
    processed_files: tuple[str, ...] = ()
    accepted_file_types: frozenset[str] = field(default=ACCEPTED_FILE_TYPES)

    @classmethod
    def initial(
        cls, base_path: str | Path, destination_path: str | Path
    ) -> "WorkflowContext":
        """Cree le contexte initial a partir des chemins fournis par l'appelant."""
        return cls(base_path=str(base_path), destination_path=str(destination_path))

    def with_updates(self, **changes: Any) -> "WorkflowContext":
        """
        Retourne un nouveau contexte avec les champs remplaces.

        Les sequences sont converties en tuples pour que le nouveau contexte
        ne partage aucune liste mutable avec le resultat d'un collaborateur.

        Raises:
            ValueError: Si un champ fixe a la creation est modifie
            TypeError: Si un champ inconnu est fourni
        """
        forbidden = _IMMUTABLE_FIELDS.intersection(changes)
        if forbidden:
            raise ValueError(f"Champs non modifiables: {', '.join(sorted(forbidden))}")
        return replace(self, **{name: tuple(value) for name, value in changes.items()})

    def as_dict(self) -> dict[str, Any]:
        """Instantane serialisable du contexte (logs, observateurs)."""
        snapshot: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, frozenset):
                snapshot[f.name] = sorted(value)
            elif isinstance(value, tuple):
                snapshot[f.name] = list(value)
            else:
                snapshot[f.name] = value
        return snapshot
