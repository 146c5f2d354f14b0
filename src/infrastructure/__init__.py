"""
Couche infrastructure.

Utilitaires techniques partages par les adaptateurs :

- hash_service : empreinte XXHash par echantillons pour reconnaitre un
  fichier deja present dans la mediatheque
"""
