"""
Adaptateurs de lecture des metadonnees techniques.

Ce package contient les implementations concretes des interfaces de metadonnees:
- MediaInfoExtractor: Extrait la resolution avec pymediainfo
"""
