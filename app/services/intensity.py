"""
IPL intensity advisor.

Safety exclusions run before the matrix and regardless of whether the hair
color has a matrix column:

1. Fitzpatrick VI skin is never treated.
2. Blonde and red hair are never treated.
3. Otherwise the (Fitzpatrick bucket, hair color) cell decides; a missing
   cell falls back to a cautious low range.
"""

import logging
from types import MappingProxyType
from typing import Optional

from app.schemas import HairColor, IntensityRecommendation
from app.services.classification import fitzpatrick_bucket

logger = logging.getLogger(__name__)

NOT_RECOMMENDED = "Não recomendado"


def _level(initial: int, maximum: int, observations: str) -> IntensityRecommendation:
    return IntensityRecommendation(
        initial_intensity=f"Nível {initial}",
        max_intensity=f"Nível {maximum}",
        observations=observations,
        is_recommended=True,
    )


def _not_recommended(observations: str) -> IntensityRecommendation:
    return IntensityRecommendation(
        initial_intensity=NOT_RECOMMENDED,
        max_intensity=NOT_RECOMMENDED,
        observations=observations,
        is_recommended=False,
    )


HIGH_BURN_RISK = _not_recommended(
    "Risco alto de queimaduras. Consulte um dermatologista para alternativas seguras."
)
LOW_EFFICACY_LIGHT_HAIR = _not_recommended(
    "Baixa eficácia em cabelos claros. Considere outros métodos de depilação."
)
DEFAULT_RECOMMENDATION = _level(
    1, 2, "Proceda com cautela. Consulte um profissional para orientação personalizada."
)

LIGHT_HAIR_COLORS = frozenset({HairColor.LOIRO.value, HairColor.RUIVO.value})

PRETO = HairColor.PRETO.value
CASTANHO_ESCURO = HairColor.CASTANHO_ESCURO.value
CASTANHO_MEDIO = HairColor.CASTANHO_MEDIO.value
CASTANHO_CLARO = HairColor.CASTANHO_CLARO.value

INTENSITY_MATRIX = MappingProxyType({
    "I-II": MappingProxyType({
        PRETO: _level(3, 5, "Comece no nível 3 e aumente para 5 após 2-3 sessões se não houver irritação."),
        CASTANHO_ESCURO: _level(2, 4, "Aumente para nível 4 após 3 sessões, monitorando a reação da pele."),
        CASTANHO_MEDIO: _level(2, 3, "Aumente gradualmente, observando a resposta da pele."),
        CASTANHO_CLARO: _level(1, 3, "Eficácia pode ser limitada. Monitore os resultados cuidadosamente."),
    }),
    "III": MappingProxyType({
        PRETO: _level(2, 4, "Aumente gradualmente, evitando exposição solar antes e após as sessões."),
        CASTANHO_ESCURO: _level(1, 3, "Use 1-2 sessões no nível 1 e avance se a pele responder bem."),
        CASTANHO_MEDIO: _level(1, 2, "Proceda com cautela, aumentando apenas se não houver reações."),
        CASTANHO_CLARO: _level(1, 2, "Eficácia limitada. Considere métodos alternativos."),
    }),
    "IV": MappingProxyType({
        PRETO: _level(1, 3, "Teste em pequena área primeiro. Aumente intensidade só se tolerável."),
        CASTANHO_ESCURO: _level(1, 2, "Use com extrema cautela. Considere consulta dermatológica."),
        CASTANHO_MEDIO: _level(1, 2, "Limite-se ao nível 2 para evitar riscos de hiperpigmentação."),
        CASTANHO_CLARO: _level(1, 1, "Mantenha intensidade baixa. Eficácia pode ser limitada."),
    }),
    "V": MappingProxyType({
        PRETO: _level(1, 2, "Proceda com extrema cautela. Considere consulta médica."),
        CASTANHO_ESCURO: _level(1, 2, "Use com cuidado extremo, preferindo sessões mais espaçadas."),
        CASTANHO_MEDIO: _level(1, 1, "Mantenha intensidade mínima. Alto risco de hiperpigmentação."),
        CASTANHO_CLARO: _not_recommended("Risco muito alto. Consulte um dermatologista."),
    }),
})


def recommend(skin_tone: Optional[str], hair_color: Optional[str]) -> IntensityRecommendation:
    """Recommend an intensity range; never raises."""
    fitzpatrick = fitzpatrick_bucket(skin_tone)
    hair = hair_color.value if isinstance(hair_color, HairColor) else hair_color

    if fitzpatrick == "VI":
        return HIGH_BURN_RISK

    if hair in LIGHT_HAIR_COLORS:
        return LOW_EFFICACY_LIGHT_HAIR

    recommendation = INTENSITY_MATRIX.get(fitzpatrick, {}).get(hair)
    if recommendation is None:
        logger.debug(f"No intensity cell for {fitzpatrick}/{hair}, using default")
        return DEFAULT_RECOMMENDATION
    return recommendation
