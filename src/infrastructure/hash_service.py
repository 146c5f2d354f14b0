"""
Empreinte rapide de fichiers media par echantillonnage XXHash.

Sert a reconnaitre qu'une destination deja presente dans la mediatheque
est le meme fichier que la source (deplacement deja applique lors d'une
execution precedente interrompue) plutot qu'une collision de nom.

L'empreinte couvre le debut du fichier, sa fin (si le fichier depasse deux
echantillons) et sa taille.
"""

import os
from pathlib import Path

import xxhash

# 1 Mo par echantillon
SAMPLE_SIZE = 1024 * 1024


def compute_file_hash(file_path: Path, sample_size: int = SAMPLE_SIZE) -> str:
    """
    Calcule l'empreinte XXH3-64 d'un fichier.

    Args :
        file_path : Fichier a hasher
        sample_size : Taille de chaque echantillon en octets

    Retourne :
        Hash hexadecimal de 16 caracteres

    Raises :
        OSError : Si le fichier est absent ou illisible
    """
    hasher = xxhash.xxh3_64()
    file_size = file_path.stat().st_size

    with open(file_path, "rb") as f:
        hasher.update(f.read(sample_size))
        if file_size > 2 * sample_size:
            f.seek(-sample_size, os.SEEK_END)
            hasher.update(f.read(sample_size))

    hasher.update(str(file_size).encode())
    return hasher.hexdigest()
