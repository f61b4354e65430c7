"""Utility weighting.

Every candidate action is reduced to a (benefit, cost) pair of positive
products and mapped onto (0, 1) by one saturating curve, so that a push, a
shield and a move can be ranked against each other.
"""


def utility_score(benefit: float, cost: float) -> float:
    """
    Saturating preference score: 1 - 1 / ((benefit / cost)^2 + 1).

    0.5 when benefit equals cost, rising toward 1 as benefit dominates and
    falling toward 0 as cost dominates. A zero cost is the saturated limit:
    1.0 for any positive benefit, 0.0 when there is no benefit either.
    """
    if cost == 0:
        return 1.0 if benefit > 0 else 0.0
    ratio = benefit / cost
    return 1 - 1 / (ratio * ratio + 1)
