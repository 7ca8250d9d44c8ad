"""Resolve how often a screening recurs for a matched age band."""

from dataclasses import dataclass

from screenwise.domain.models import AgeBand, Guideline

DEFAULT_FREQUENCY_MONTHS = 12


@dataclass(frozen=True)
class ResolvedFrequency:
    min_months: int
    max_months: int | None
    text: str


def resolve_frequency(
    band: AgeBand | None,
    guideline: Guideline,
    default_months: int = DEFAULT_FREQUENCY_MONTHS,
) -> ResolvedFrequency:
    """
    Band values win over the guideline's top-level ones; annual when neither says.

    A band that sets either interval bound owns the maximum; a missing band
    minimum still falls back to the guideline's. The display text gets the
    numeric interval appended, e.g. ``"Every 1-3 years (12-36 months)"``,
    ``"Annual (min 12 months)"`` or ``"(up to 24 months)"``.
    """
    if band is not None and (
        band.frequency_months is not None or band.frequency_months_max is not None
    ):
        min_months: int | None = band.frequency_months or guideline.frequency_months
        max_months = band.frequency_months_max
    else:
        min_months = guideline.frequency_months
        max_months = guideline.frequency_months_max

    text = (band.frequency if band is not None else None) or guideline.frequency or ""

    if min_months is not None and max_months is not None:
        suffix = f"({min_months}-{max_months} months)"
    elif min_months is not None:
        suffix = f"(min {min_months} months)"
    elif max_months is not None:
        suffix = f"(up to {max_months} months)"
    else:
        suffix = ""

    text = f"{text} {suffix}".strip() if suffix else text

    return ResolvedFrequency(
        min_months=min_months if min_months is not None else default_months,
        max_months=max_months,
        text=text,
    )
