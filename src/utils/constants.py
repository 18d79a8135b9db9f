"""
Constantes globales pour media-scanner.

Ce module contient les constantes utilisees dans l'application:
- Types de fichiers media acceptes par le workflow
- Patterns a ignorer lors de l'evaluation
- Ordre des libelles de resolution
"""

# Types de fichiers acceptes (extensions sans le point, en minuscules)
ACCEPTED_FILE_TYPES = frozenset({
    "mp4",
    "mkv",
    "avi",
    "mov",
    "m4v",
    "mpg",
    "mpeg",
    "wmv",
    "flv",
    "ts",
    "mts",
})

# Patterns a ignorer (sample, trailers, extras)
IGNORED_PATTERNS = frozenset({
    "sample",
    "trailer",
    "preview",
    "extras",
    "bonus",
})

# Libelles de resolution, du plus faible au plus eleve
RESOLUTION_LABELS = ("SD", "720p", "1080p", "4K")
