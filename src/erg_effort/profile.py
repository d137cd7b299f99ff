"""
Athlete profile resolution.

Stored athlete records are often incomplete (no birth date, no resting heart
rate measured yet). The scoring formulas assume a fully populated profile, so
all fallbacks are applied here, once, before any calculation runs.
"""

import logging
from datetime import date, datetime

from .constants import ProfileDefaults
from .models import AthleteProfile
from .settings import Settings

logger = logging.getLogger(__name__)


def age_from_birth_date(birth_date: date | datetime, today: date | None = None) -> int:
    """
    Whole years elapsed since a birth date.

    Args:
        birth_date: Date of birth
        today: Reference date, defaults to the current date

    Returns:
        Age in completed years
    """
    if isinstance(birth_date, datetime):
        birth_date = birth_date.date()
    today = today or date.today()

    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def estimate_max_hr(age: float) -> int:
    """Estimate maximum heart rate with the 220 - age rule."""
    return int(round(ProfileDefaults.MAX_HR_AGE_BASE - age))


def resolve_profile(
    settings: Settings,
    *,
    birth_date: date | datetime | None = None,
    age: float | None = None,
    weight_kg: float | None = None,
    height_cm: float | None = None,
    max_hr: float | None = None,
    resting_hr: float | None = None,
    today: date | None = None,
) -> AthleteProfile:
    """
    Build a fully populated profile from optional athlete fields.

    Missing or zero values fall back to the defaults in settings. An explicit
    age takes precedence over a birth date.

    Args:
        settings: Settings holding the profile defaults
        birth_date: Date of birth, used to derive age
        age: Age in years
        weight_kg: Body mass in kilograms
        height_cm: Height in centimetres
        max_hr: Maximum heart rate in bpm
        resting_hr: Resting heart rate in bpm
        today: Reference date for age derivation

    Returns:
        Resolved AthleteProfile
    """
    if not age:
        if birth_date is not None:
            age = age_from_birth_date(birth_date, today)
        else:
            logger.debug(f"No age or birth date, using {settings.default_age}")
            age = settings.default_age

    if not weight_kg:
        logger.debug(f"No weight, using {settings.default_weight_kg} kg")
        weight_kg = settings.default_weight_kg

    if not height_cm:
        height_cm = settings.default_height_cm

    if not max_hr:
        if settings.estimate_max_hr_from_age:
            max_hr = estimate_max_hr(age)
            logger.debug(f"No max HR, estimated {max_hr} bpm from age {age}")
        else:
            logger.debug(f"No max HR, using {settings.default_max_hr} bpm")
            max_hr = settings.default_max_hr

    if not resting_hr:
        logger.debug(f"No resting HR, using {settings.default_resting_hr} bpm")
        resting_hr = settings.default_resting_hr

    return AthleteProfile(
        age=age,
        weight_kg=weight_kg,
        height_cm=height_cm,
        max_hr=max_hr,
        resting_hr=resting_hr,
    )
