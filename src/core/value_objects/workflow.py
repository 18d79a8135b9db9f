"""
Objets valeur retournes par les collaborateurs du workflow.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PermissionCheckResult:
    """
    Resultat de la verification des permissions.

    Attributs :
        dirs_to_evaluate : Repertoires accessibles en lecture/ecriture
        dirs_to_report : Repertoires en echec, a signaler
    """

    dirs_to_evaluate: tuple[str, ...] = field(default_factory=tuple)
    dirs_to_report: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EvaluationResult:
    """
    Resultat de l'evaluation des fichiers.

    Attributs :
        dirs_to_move : Fichiers selectionnes pour le deplacement
    """

    dirs_to_move: tuple[str, ...] = field(default_factory=tuple)
