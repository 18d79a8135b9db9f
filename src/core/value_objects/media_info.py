"""
Objets valeur pour les informations média.

Objets valeur immutables représentant les informations techniques des fichiers vidéo.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilité.
"""

from dataclasses import dataclass

from src.utils.constants import RESOLUTION_LABELS


@dataclass(frozen=True)
class Resolution:
    """
    Résolution vidéo (largeur x hauteur).

    Attributs :
        width : Résolution horizontale en pixels
        height : Résolution verticale en pixels

    Propriétés :
        label : Libellé lisible (4K, 1080p, 720p, SD)
        rank : Position du libellé dans RESOLUTION_LABELS (0 = SD)
    """

    width: int
    height: int

    @property
    def label(self) -> str:
        """
        Retourne le libelle de resolution base sur la largeur et hauteur.

        Prend en compte les formats cinematographiques (2.35:1, 2.40:1)
        ou la hauteur est reduite mais la largeur reste standard.
        """
        # 4K: 3840x2160 ou plus (seuil tolerant: 3800 pour cinema)
        if self.height >= 2160 or self.width >= 3800:
            return "4K"
        # 1080p: 1920x1080 ou plus (seuil tolerant: 1900 pour cinema)
        elif self.height >= 1080 or self.width >= 1900:
            return "1080p"
        # 720p: 1280x720 ou plus (seuil tolerant: 1260 pour cinema)
        elif self.height >= 720 or self.width >= 1260:
            return "720p"
        else:
            return "SD"

    @property
    def rank(self) -> int:
        """Rang du libelle, pour comparer deux resolutions par palier."""
        return RESOLUTION_LABELS.index(self.label)

    def meets(self, minimum_label: str) -> bool:
        """Verifie si la resolution atteint le palier minimum_label."""
        return self.rank >= RESOLUTION_LABELS.index(minimum_label)
