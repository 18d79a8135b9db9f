"""
Couche application (cas d'utilisation).

Les services orchestrent la logique du domaine :
- workflow/ : machine à états qui enchaîne scan, permissions, évaluation,
  déplacement et signalement des erreurs
- evaluator.py : sélection des fichiers à déplacer

Les services dépendent des ports (interfaces) de core/, jamais des
implémentations concrètes de adapters/.
"""
