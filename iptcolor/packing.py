"""Packed 32-bit IPT color words.

Layout, least significant byte first:
    byte 0: intensity  (0-255)
    byte 1: protan     (0-255, 127/128 is neutral)
    byte 2: tritan     (0-255, 127/128 is neutral)
    byte 3: alpha      (even values 0-254; bit 0 is always clear)

Keeping the lowest alpha bit clear means the word, read as a float32, is never
NaN or infinite, so it can ride through float-typed vertex attributes. The
word itself is always handled as an unsigned int; word_to_float() and
float_to_word() reinterpret the bits only when a float is needed.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ._backend import Array

INTENSITY_MASK = 0x000000FF
PROTAN_MASK = 0x0000FF00
TRITAN_MASK = 0x00FF0000
ALPHA_MASK = 0xFE000000
WORD_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class IPTColor:
    """An IPT color with normalized channels.

    Attributes:
        intensity: Lightness, 0 is black and 1 is white
        protan: Green (0) to red (1) axis, 0.5 is neutral
        tritan: Blue (0) to yellow (1) axis, 0.5 is neutral
        alpha: Opacity, 0 is transparent
    """
    intensity: float
    protan: float
    tritan: float
    alpha: float = 1.0

    @classmethod
    def from_packed(cls, packed: int) -> IPTColor:
        return unpack(packed)

    def pack(self) -> int:
        return pack(self.intensity, self.protan, self.tritan, self.alpha)

    @property
    def ipt(self) -> tuple[float, float, float]:
        """The (intensity, protan, tritan) triple, without alpha."""
        return self.intensity, self.protan, self.tritan


def pack(intensity: float, protan: float, tritan: float, alpha: float = 1.0) -> int:
    """Encode four normalized channels into a packed word.

    Each channel is scaled by 255 and truncated into its lane; values outside
    [0, 1] wrap silently. Alpha 1.0 is stored as 254, the largest even byte.
    """
    return (
        (int(alpha * 255) << 24 & ALPHA_MASK)
        | (int(tritan * 255) << 16 & TRITAN_MASK)
        | (int(protan * 255) << 8 & PROTAN_MASK)
        | (int(intensity * 255) & INTENSITY_MASK)
    )


def pack_centered(intensity: float, protan: float, tritan: float, alpha: float = 1.0) -> int:
    """pack() taking centered protan/tritan in [-1, 1].

    Chroma is scaled by 127.5 around 127.5 so that values read back with
    decode_centered() re-encode to the same byte.
    """
    return (
        (int(alpha * 255) << 24 & ALPHA_MASK)
        | (int(tritan * 127.5 + 127.5) << 16 & TRITAN_MASK)
        | (int(protan * 127.5 + 127.5) << 8 & PROTAN_MASK)
        | (int(intensity * 255) & INTENSITY_MASK)
    )


def unpack(packed: int) -> IPTColor:
    """Decode a packed word into normalized channels."""
    return IPTColor(
        intensity=(packed & 0xFF) / 255.0,
        protan=(packed >> 8 & 0xFF) / 255.0,
        tritan=(packed >> 16 & 0xFF) / 255.0,
        alpha=(packed >> 25 & 0x7F) / 127.0,
    )


def decode_centered(packed: int) -> tuple[float, float, float]:
    """Intensity in [0, 1] plus centered protan/tritan in [-1, 1]."""
    return (
        (packed & 0xFF) / 255.0,
        ((packed >> 8 & 0xFF) - 127.5) / 127.5,
        ((packed >> 16 & 0xFF) - 127.5) / 127.5,
    )


# === Lane accessors ===

def intensity(packed: int) -> float:
    return (packed & 0xFF) / 255.0


def protan(packed: int) -> float:
    return (packed >> 8 & 0xFF) / 255.0


def tritan(packed: int) -> float:
    return (packed >> 16 & 0xFF) / 255.0


def alpha(packed: int) -> float:
    return (packed >> 24 & 0xFE) / 254.0


def alpha_int(packed: int) -> int:
    """Raw alpha byte, always even (0-254)."""
    return packed >> 24 & 0xFE


def alpha_bits(packed: int) -> int:
    """The alpha lane left in place, for ORing into another word."""
    return packed & ALPHA_MASK


# === Float reinterpretation ===

def word_to_float(packed: int) -> float:
    """Reinterpret a packed word's bits as a float32 value."""
    return float(np.array(packed & WORD_MASK, dtype=np.uint32).view(np.float32))


def float_to_word(value: float) -> int:
    """Reinterpret a float32 value's bits as a packed word."""
    return int(np.array(value, dtype=np.float32).view(np.uint32))


def words_to_floats(words: Array) -> np.ndarray:
    """Reinterpret an array of packed words as float32 (no copy when possible)."""
    return np.asarray(words, dtype=np.uint32).view(np.float32)


def floats_to_words(values: Array) -> np.ndarray:
    """Reinterpret an array of float32 values as packed words."""
    return np.asarray(values, dtype=np.float32).view(np.uint32)
