from __future__ import annotations

from pedigree_engine.domain.models.breeding import PredictedTrait
from pedigree_engine.domain.models.individual import Individual


def _color(individual: Individual | None) -> str | None:
    if individual is None or individual.color is None:
        return None
    value = individual.color.strip()
    return value or None


def predict_offspring_traits(
    individual_a: Individual | None, individual_b: Individual | None
) -> list[PredictedTrait]:
    """Coarse coat-color guess for an offspring of A and B.

    Same color on both sides predicts that color outright; different colors
    split evenly between the two parents' colors. No other combination is ever
    invented, and an unknown color on either side yields no prediction.
    """
    color_a, color_b = _color(individual_a), _color(individual_b)
    if color_a is None or color_b is None:
        return []
    if color_a.casefold() == color_b.casefold():
        return [PredictedTrait(label=color_a, probability=1.0)]
    return [
        PredictedTrait(label=color_a, probability=0.5),
        PredictedTrait(label=color_b, probability=0.5),
    ]
