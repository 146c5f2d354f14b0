"""
Mediatheque - Integration de mediensets dans une mediatheque personnelle.

Ce package regroupe les exports video (variantes, images de couverture,
descripteurs XML) en mediensets et les deplace dans une arborescence
Album/Annee/Date a partir des metadonnees embarquees.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (regroupement, resolution, integration)
- adapters/ : Couche infrastructure (CLI, système de fichiers, ffmpeg, XML)
"""
