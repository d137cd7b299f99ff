"""
Power estimation for rowing ergometers.

Concept2 monitors derive power from pace with a cube law:
watts = 2.80 * velocity^3, velocity in metres per second.
"""

from ..constants import PowerConstants, TimeConstants


def calculate_watts(distance_metres: float, time_seconds: float) -> float:
    """
    Average power for a distance rowed in a given time.

    Args:
        distance_metres: Distance in metres
        time_seconds: Time in seconds

    Returns:
        Average watts, 0.0 for non-positive distance or time
    """
    if distance_metres <= 0 or time_seconds <= 0:
        return 0.0
    velocity = distance_metres / time_seconds
    return PowerConstants.WATTS_COEFFICIENT * velocity**PowerConstants.VELOCITY_EXPONENT


def split_seconds(distance_metres: float, time_seconds: float) -> float:
    """
    Pace in seconds per 500m.

    Args:
        distance_metres: Distance in metres
        time_seconds: Time in seconds

    Returns:
        Seconds per 500m, 0.0 for non-positive distance
    """
    if distance_metres <= 0:
        return 0.0
    return time_seconds / distance_metres * TimeConstants.SPLIT_DISTANCE_METRES
