"""
Static classification tables for skin tone and hair color.

Raw onboarding values are mapped to two different skin scales: a coarse bucket
used for the session schedule and a Fitzpatrick-like bucket used for intensity
advice. Lookups never fail; unknown input resolves to the documented default.
"""

from types import MappingProxyType
from typing import Optional

from app.schemas import HairColor, SkinTone

DEFAULT_SKIN_BUCKET = "medium"
DEFAULT_FITZPATRICK_BUCKET = "III"
DEFAULT_HAIR_BUCKET = "black"

SKIN_TONE_BUCKETS = MappingProxyType({
    SkinTone.BRANCO.value: "light",
    SkinTone.BEGE.value: "light",
    SkinTone.CASTANHO_CLARO.value: "medium-light",
    SkinTone.CASTANHO_MEDIO.value: "medium",
    SkinTone.CASTANHO_ESCURO.value: "dark",
    SkinTone.CASTANHO_MUITO_ESCURO.value: "very-dark",
})

FITZPATRICK_BUCKETS = MappingProxyType({
    SkinTone.BRANCO.value: "I-II",
    SkinTone.BEGE.value: "III",
    SkinTone.CASTANHO_CLARO.value: "IV",
    SkinTone.CASTANHO_MEDIO.value: "V",
    SkinTone.CASTANHO_ESCURO.value: "VI",
    SkinTone.CASTANHO_MUITO_ESCURO.value: "VI",
})

HAIR_COLOR_BUCKETS = MappingProxyType({
    HairColor.PRETO.value: "black",
    HairColor.CASTANHO_ESCURO.value: "dark-brown",
    HairColor.CASTANHO_MEDIO.value: "medium-brown",
    HairColor.CASTANHO_CLARO.value: "light-brown",
    HairColor.LOIRO.value: "blonde",
    HairColor.RUIVO.value: "red",
})


def _key(value: Optional[str]) -> Optional[str]:
    # Enum members and their raw string values share one lookup key
    if isinstance(value, (SkinTone, HairColor)):
        return value.value
    return value


def skin_bucket(skin_tone: Optional[str]) -> str:
    return SKIN_TONE_BUCKETS.get(_key(skin_tone), DEFAULT_SKIN_BUCKET)


def fitzpatrick_bucket(skin_tone: Optional[str]) -> str:
    return FITZPATRICK_BUCKETS.get(_key(skin_tone), DEFAULT_FITZPATRICK_BUCKET)


def hair_bucket(hair_color: Optional[str]) -> str:
    return HAIR_COLOR_BUCKETS.get(_key(hair_color), DEFAULT_HAIR_BUCKET)
