"""Order guidelines by how close a person's age is to one of their bands."""

from screenwise.domain.models import Guideline, Person

FAR_AWAY = 1000


def relevance_score(guideline: Guideline, age: int, sentinel: int = FAR_AWAY) -> int:
    """
    0 when a band applies now, otherwise the distance in years to the nearest
    band ahead or behind, whichever is closer. ``sentinel`` when there is neither.
    """
    if any(band.contains(age) for band in guideline.age_ranges):
        return 0

    ahead = [band.min - age for band in guideline.age_ranges if band.min > age]
    behind = [
        age - band.max for band in guideline.age_ranges if band.max is not None and band.max < age
    ]
    distances = ahead + behind
    return min(distances) if distances else sentinel


def rank_by_relevance(
    guidelines: list[Guideline], person: Person | None, sentinel: int = FAR_AWAY
) -> list[Guideline]:
    """Stable ascending sort by relevance score; empty when there is no profile."""
    if person is None:
        return []
    return sorted(guidelines, key=lambda g: relevance_score(g, person.age, sentinel))
