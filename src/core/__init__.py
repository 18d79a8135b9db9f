"""
Couche domaine (core).

Contient les ports (interfaces abstraites), objets valeur et exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (Resolution, résultats des collaborateurs)
- exceptions.py : Erreurs levées par les collaborateurs du workflow
"""
