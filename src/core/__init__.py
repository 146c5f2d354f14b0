"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, outils externes).

Sous-packages :
- entities/ : Entités métier (MediaSet, SupportedVideo, rapports d'integration)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (MediaKind, Descriptor)
"""
