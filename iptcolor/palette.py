"""Named colors and plain-language color descriptions.

Fifty named colors (plus a few aliases) are defined by their RGBA8888 codes
and converted to packed IPT words the first time the palette is used.

parse_description() turns text such as "lighter richer teal" or "pale cyan
blue" into a color: every color name is mixed evenly, then adjectives adjust
lightness and saturation.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Mapping

from .blending import mix
from .conversions import from_rgba8888
from .defaults import DESCRIPTION_LIGHTNESS_STEP, DESCRIPTION_SATURATION_STEPS
from .editing import darken, dullen, enrich, lighten
from .gamut import limit_packed

logger = logging.getLogger(__name__)


# Name -> RGBA8888
PALETTE_CODES: dict[str, int] = {
    "transparent": 0x00000000,
    "black": 0x000000FF,
    "gray": 0x808080FF,
    "silver": 0xB6B6B6FF,
    "white": 0xFFFFFFFF,
    "red": 0xFF0000FF,
    "orange": 0xFF7F00FF,
    "yellow": 0xFFFF00FF,
    "green": 0x00FF00FF,
    "blue": 0x0000FFFF,
    "indigo": 0x520FE0FF,
    "violet": 0x9040EFFF,
    "purple": 0xC000FFFF,
    "brown": 0x8F573BFF,
    "pink": 0xFFA0E0FF,
    "magenta": 0xF500F5FF,
    "brick": 0xD5524AFF,
    "ember": 0xF55A32FF,
    "salmon": 0xFF6262FF,
    "chocolate": 0x683818FF,
    "tan": 0xD2B48CFF,
    "bronze": 0xCE8E31FF,
    "cinnamon": 0xD2691DFF,
    "apricot": 0xFFA828FF,
    "peach": 0xFFBF81FF,
    "pear": 0xD3E330FF,
    "saffron": 0xFFD510FF,
    "butter": 0xFFF288FF,
    "chartreuse": 0xC8FF41FF,
    "cactus": 0x30A000FF,
    "lime": 0x93D300FF,
    "olive": 0x818000FF,
    "fern": 0x4E7942FF,
    "moss": 0x204608FF,
    "celery": 0x7DFF73FF,
    "sage": 0xABE3C5FF,
    "jade": 0x3FBF3FFF,
    "cyan": 0x00FFFFFF,
    "mint": 0x7FFFD4FF,
    "teal": 0x007F7FFF,
    "turquoise": 0x2ED6C9FF,
    "sky": 0x10C0E0FF,
    "cobalt": 0x0046ABFF,
    "denim": 0x3088B8FF,
    "navy": 0x000080FF,
    "lavender": 0xB991FFFF,
    "plum": 0xBE0DC6FF,
    "mauve": 0xAB73ABFF,
    "rose": 0xE61E78FF,
    "raspberry": 0x911437FF,
}

# Alternative spellings and near-synonyms; not listed by names_by_lightness()
ALIASES: dict[str, str] = {
    "grey": "gray",
    "gold": "saffron",
    "puce": "mauve",
    "sand": "tan",
    "skin": "peach",
    "coral": "salmon",
    "azure": "sky",
    "ocean": "teal",
    "sapphire": "cobalt",
}

# Adjective stem -> (lightness direction, saturation direction)
_ADJECTIVES: dict[str, tuple[int, int]] = {
    "light": (1, 0),
    "dark": (-1, 0),
    "rich": (0, 1),
    "dull": (0, -1),
    "bright": (1, 1),
    "pale": (1, -1),
    "deep": (-1, 1),
    "weak": (-1, -1),
}

_WORD_SPLIT = re.compile(r"[^a-zA-Z]+")

_named: Mapping[str, int] | None = None
_modifiers: dict[str, tuple[float, float]] | None = None


def _build_named() -> Mapping[str, int]:
    table = {name: from_rgba8888(code) for name, code in PALETTE_CODES.items()}
    for alias, target in ALIASES.items():
        table[alias] = table[target]
    logger.debug("Built named palette: %d colors, %d aliases", len(PALETTE_CODES), len(ALIASES))
    return MappingProxyType(table)


def _build_modifiers() -> dict[str, tuple[float, float]]:
    """Every recognized adjective form -> (lightness change, saturation change).

    Each stem has four strengths: the bare word, then -er, -est and -most.
    Stems ending in 'e' take -r and -st ("paler", "palest").
    """
    modifiers = {}
    for stem, (light_dir, sat_dir) in _ADJECTIVES.items():
        if stem.endswith("e"):
            forms = (stem, stem + "r", stem + "st", stem + "most")
        else:
            forms = (stem, stem + "er", stem + "est", stem + "most")
        for level, word in enumerate(forms, start=1):
            modifiers[word] = (
                light_dir * DESCRIPTION_LIGHTNESS_STEP * level,
                sat_dir * sum(DESCRIPTION_SATURATION_STEPS[:level]),
            )
    return modifiers


def named_colors() -> Mapping[str, int]:
    """Read-only mapping of every name and alias to its packed color."""
    global _named
    if _named is None:
        _named = _build_named()
    return _named


def lookup(name: str) -> int:
    """Packed color for a name or alias (case-insensitive); unknown names give transparent."""
    return named_colors().get(name.lower(), named_colors()["transparent"])


def names_by_lightness() -> list[str]:
    """Palette names, aliases excluded, from darkest to lightest intensity."""
    named = named_colors()
    return sorted(PALETTE_CODES, key=lambda name: named[name] & 0xFF)


def parse_description(description: str) -> int:
    """Turn a color description into a packed color.

    Words are separated by any non-letters. Color names are mixed with equal
    weight (repeat a name to weight it more). Any word that is neither a color
    nor an adjective counts as transparent. Adjectives:

    - light / dark: raise or lower intensity
    - rich / dull: push chroma away from or toward gray
    - bright = light + rich, pale = light + dull,
      deep = dark + rich, weak = dark + dull

    Each can take -er, -est or -most for a stronger effect, for example
    "darkest", "richmost" or "palest".

    Args:
        description: Text such as "lightest richer apricot-olive"

    Returns:
        Packed IPT color, limited to the gamut
    """
    global _modifiers
    if _modifiers is None:
        _modifiers = _build_modifiers()

    lightness = 0.0
    saturation = 0.0
    colors = []
    for word in _WORD_SPLIT.split(description.lower()):
        if not word:
            continue
        if word in _modifiers:
            light_change, sat_change = _modifiers[word]
            lightness += light_change
            saturation += sat_change
        else:
            colors.append(lookup(word))

    result = mix(*colors)
    if lightness > 0:
        result = lighten(result, min(lightness, 1.0))
    elif lightness < 0:
        result = darken(result, min(-lightness, 1.0))

    if saturation > 0:
        return enrich(result, saturation)
    if saturation < 0:
        return limit_packed(dullen(result, min(-saturation, 1.0)))
    return limit_packed(result)
