"""
Constantes globales pour AniTrack.

Ce module contient les constantes partagees par les parsers et services :
- Extensions video reconnues et suffixe des fichiers compresses
- Groupes de release reputes fiables
"""

# Extensions video reconnues (comparees en minuscules, sans le point)
VIDEO_EXTENSIONS = frozenset({
    "mkv",
    "mp4",
    "avi",
    "webm",
    "m4v",
    "mov",
})

# Suffixe ajoute aux episodes archives (compression zstd)
COMPRESSED_EXTENSION = ".zst"

# Groupes de release reputes fiables (compares en minuscules)
RELIABLE_GROUPS = (
    "subsplease",
    "erai-raws",
    "judas",
    "horriblesubs",
)
