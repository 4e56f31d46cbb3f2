"""
AniTrack - Identification et suivi de series anime telechargees.

Ce package transforme des chaines non structurees (titres de releases, noms de
fichiers, noms de repertoires, requetes libres) en identifiants structures :
serie, saison, episode, groupe de release et qualite.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (parsing, analyse, recherche, suivi)
- adapters/ : Couche infrastructure (systeme de fichiers, CLI)
"""

__version__ = "0.1.0"
