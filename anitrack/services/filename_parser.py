"""
Parser de noms de fichiers et de titres de releases anime.

Extrait numero d'episode, numero de saison, groupe de release et qualite
depuis une chaine sans schema fixe. Chaque extraction est une cascade ordonnee
de patterns etroits : le premier pattern qui produit une valeur acceptable
l'emporte. L'ordre des tables fait partie du contrat, le modifier change les
resultats.

Ordre de la cascade episode :
1. " - NN" (convention des groupes de fansub), suffixe de version vN ignore
2. SxxEyy (retourne la composante episode)
3. nombre nu entre separateurs (.NN. _NN_ " NN ") avant extension ou separateur
4. nombre en tete de nom avant separateur ou extension
5. prefixe Episode / Ep / EP
6. E + chiffres, suffixe de version optionnel, borne par des separateurs

Ordre de la cascade saison :
1. prefixe S (S02, S02E05)
2. "Season N"
3. ordinal ("2nd Season", "Second Season")
4. chiffres romains II a X apres le titre
5. "Part N"
6. "Cour N"
7. suffixe CJK 期 ("第2期", "2期", "第二期")
"""

import re
from typing import Optional

from anitrack.core.ports.parser import IFilenameParser
from anitrack.core.value_objects.parsed_info import ParsedFilename
from anitrack.utils.constants import COMPRESSED_EXTENSION, VIDEO_EXTENSIONS

# Bornes exclusives d'acceptation
MAX_EPISODE = 1000
MAX_SEASON = 100

EPISODE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # [SubGroup] Show Name - 01 [1080p].mkv, Show Name - 01v2.mkv
    re.compile(r"- (\d{1,4})(?:v\d)?(?:\s*[\[\(]|\.|\s|$)"),
    # Show.Name.S01E01.mkv
    re.compile(r"[Ss]\d{1,2}[Ee](\d{1,3})"),
    # Show.Name.01.mkv, Show_Name_01_[720p].mkv
    re.compile(r"[._\s](\d{1,3})[._\s]*(?:\[|$|\.)"),
    # 01.mkv, 01 - Titre.mkv
    re.compile(r"^(\d{1,3})(?:\s*[-._]|\.mkv|\.mp4|\.avi)"),
    # Episode 01, Ep 01, EP01
    re.compile(r"[Ee][Pp](?:isode)?[\s._]*(\d{1,3})"),
    # Show - E01.mkv
    re.compile(r"(?:[-._\s]|^)[Ee](\d{1,4})(?:v\d)?(?:[._\s]|$)"),
)

_ORDINAL_WORDS = {
    "first": 1,
    "second": 2,
    "third": 3,
    "fourth": 4,
    "fifth": 5,
    "sixth": 6,
    "seventh": 7,
    "eighth": 8,
    "ninth": 9,
    "tenth": 10,
}

_ROMAN_NUMERALS = {
    "II": 2,
    "III": 3,
    "IV": 4,
    "V": 5,
    "VI": 6,
    "VII": 7,
    "VIII": 8,
    "IX": 9,
    "X": 10,
}

_CJK_NUMERALS = {
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
    "十": 10,
}

SEASON_PATTERNS: tuple[re.Pattern[str], ...] = (
    # S02, S02E05, [S2]
    re.compile(r"(?:^|[\s._\-\[\(])[Ss](\d{1,2})(?=[Ee]\d|[\s._\-\]\)]|$)"),
    # Season 2, Season.02
    re.compile(r"\bSeason[\s._]*(\d{1,2})\b", re.IGNORECASE),
    # 2nd Season
    re.compile(r"\b(\d{1,2})(?:st|nd|rd|th)[\s._-]*Season\b", re.IGNORECASE),
    # Second Season
    re.compile(
        r"\b(" + "|".join(_ORDINAL_WORDS) + r")[\s._-]*Season\b",
        re.IGNORECASE,
    ),
    # Show II - 03.mkv (majuscules uniquement, jamais en tete de nom)
    re.compile(r"(?<=[^\s._\-])[\s._]+(VIII|VII|VI|IV|IX|III|II|X|V)(?=$|[\s._\-\[\(])"),
    # Part 2
    re.compile(r"\bPart[\s._]*(\d{1,2})\b", re.IGNORECASE),
    # Cour 2
    re.compile(r"\bCour[\s._]*(\d{1,2})\b", re.IGNORECASE),
    # 第2期, 2期
    re.compile(r"第?\s*(\d{1,2})\s*期"),
    # 第二期
    re.compile(r"第([一二三四五六七八九十])期"),
)

RELEASE_GROUP_PATTERN = re.compile(r"^\[([^\]]+)\]")

QUALITY_PATTERN = re.compile(r"((?:360|480|720|1080|2160)[pP]|4[kK])")


def strip_compressed_suffix(filename: str) -> str:
    """Retire le suffixe .zst pour qu'une archive se parse comme le fichier non compresse."""
    if filename.lower().endswith(COMPRESSED_EXTENSION):
        return filename[: -len(COMPRESSED_EXTENSION)]
    return filename


def _to_int(token: str) -> Optional[int]:
    """Convertit un token capture (chiffres, ordinal, romain ou CJK) en entier."""
    if token.isdecimal():
        return int(token)
    lowered = token.lower()
    if lowered in _ORDINAL_WORDS:
        return _ORDINAL_WORDS[lowered]
    if token in _ROMAN_NUMERALS:
        return _ROMAN_NUMERALS[token]
    return _CJK_NUMERALS.get(token)


def _first_in_range(
    patterns: tuple[re.Pattern[str], ...], text: str, upper_bound: int
) -> Optional[int]:
    """
    Parcourt la cascade et retourne la premiere valeur dans ]0, upper_bound[.

    Une valeur hors bornes ne stoppe pas la cascade : le pattern suivant
    est essaye.
    """
    for pattern in patterns:
        match = pattern.search(text)
        if match is None:
            continue
        number = _to_int(match.group(1))
        if number is not None and 0 < number < upper_bound:
            return number
    return None


def parse_episode_number(filename: str) -> Optional[int]:
    """
    Extrait le numero d'episode d'un nom de fichier ou d'un titre de release.

    Args:
        filename: Nom de fichier (sans chemin) ou titre de release

    Returns:
        Numero d'episode dans ]0, 1000[, ou None si aucun pattern ne convient.
        L'appelant decide du fallback (0 = ordre manuel).
    """
    return _first_in_range(EPISODE_PATTERNS, strip_compressed_suffix(filename), MAX_EPISODE)


def parse_season_number(filename: str) -> Optional[int]:
    """
    Extrait le numero de saison explicite d'un nom.

    None signifie "pas de marqueur de saison", pas "saison 1".

    Args:
        filename: Nom de fichier, de dossier ou titre de release

    Returns:
        Numero de saison dans ]0, 100[, ou None
    """
    return _first_in_range(SEASON_PATTERNS, strip_compressed_suffix(filename), MAX_SEASON)


def parse_release_group(filename: str) -> Optional[str]:
    """Retourne le groupe de release s'il ouvre le nom entre crochets."""
    match = RELEASE_GROUP_PATTERN.match(filename)
    return match.group(1) if match else None


def parse_quality(filename: str) -> Optional[str]:
    """Retourne la premiere resolution trouvee ("1080p", "4k"...) en minuscules."""
    match = QUALITY_PATTERN.search(filename)
    return match.group(1).lower() if match else None


def parse_filename(filename: str) -> ParsedFilename:
    """Applique toutes les extractions a un nom de fichier ou titre."""
    return ParsedFilename(
        episode=parse_episode_number(filename),
        season=parse_season_number(filename),
        release_group=parse_release_group(filename),
        quality=parse_quality(filename),
    )


def is_video_file(filename: str) -> bool:
    """
    Verifie si un nom de fichier designe une video (eventuellement compressee).

    Ex: "ep.mkv" et "ep.mkv.zst" sont des videos, "ep.srt" non.
    """
    lower = strip_compressed_suffix(filename.lower())
    _, dot, extension = lower.rpartition(".")
    return bool(dot) and extension in VIDEO_EXTENSIONS


def make_show_id(name: str) -> str:
    """
    Construit un identifiant stable depuis un nom de dossier.

    Ex: "Steins;Gate" -> "steins-gate"
    """
    slug = "".join(c if c.isalnum() else "-" for c in name.lower())
    return "-".join(part for part in slug.split("-") if part)


def make_show_title(name: str) -> str:
    """Remplace les separateurs . et _ par des espaces et normalise les blancs."""
    return " ".join(name.replace("_", " ").replace(".", " ").split())


class RegexFilenameParser(IFilenameParser):
    """
    Implementation de IFilenameParser basee sur les cascades de ce module.
    """

    def parse(self, filename: str) -> ParsedFilename:
        return parse_filename(filename)
