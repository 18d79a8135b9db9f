"""
media-scanner - Maintenance d'une vidéothèque.

Ce package scanne une bibliothèque source, vérifie les droits d'accès,
sélectionne les fichiers vidéo selon leur type et leur résolution, les
déplace vers une bibliothèque de destination et signale les échecs.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, objets valeur, exceptions)
- services/ : Couche application (machine à états du workflow, évaluation)
- adapters/ : Couche infrastructure (système de fichiers, mediainfo, notification)
"""
