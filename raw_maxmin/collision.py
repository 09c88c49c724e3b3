"""Closed-form collision model for slotted RAW contention.

Every station in a group picks one of ``n_slots`` slots uniformly and
independently, so a tagged station collides when at least one of the other
k - 1 stations picks the same slot:

    c = 1 - (1 - p)^(k - 1),   p = 1 / n_slots

This is the same conditional-collision form as Bianchi's p = 1 - (1 - tau)^(N-1),
with the per-slot access probability in place of tau.
"""


def collision_probability(n_stations: int, slot_prob: float) -> float:
    """Probability that a tagged station shares its slot with another station.

    Args:
        n_stations: stations contending in the group (k >= 1)
        slot_prob: probability a station picks a given slot, in (0, 1]
    Returns:
        probability in [0, 1]; exactly 0 when k == 1, and 1 only when
        n_slots == 1 with two or more stations
    """
    if n_stations < 1:
        raise ValueError("n_stations must be >= 1")
    if not 0.0 < slot_prob <= 1.0:
        raise ValueError("slot_prob must be in (0, 1]")
    if n_stations == 1:
        return 0.0
    return 1.0 - (1.0 - slot_prob) ** (n_stations - 1)


def success_probability(n_stations: int, slot_prob: float) -> float:
    """Complement of :func:`collision_probability`."""
    return 1.0 - collision_probability(n_stations, slot_prob)
