"""
Signal Frontier — Crew Module
Crew assignment, morale, and recruitment.
"""

from .workforce import (
    clamp,
    role_multiplier,
    morale_multiplier,
    compute_satisfaction,
    change_crew,
)
from .recruitment import (
    COOLDOWN_NOTICE,
    cooldown_remaining,
    make_candidate,
    roll_recruits,
    hire,
)

__all__ = [
    # Workforce
    "clamp",
    "role_multiplier",
    "morale_multiplier",
    "compute_satisfaction",
    "change_crew",

    # Recruitment
    "COOLDOWN_NOTICE",
    "cooldown_remaining",
    "make_candidate",
    "roll_recruits",
    "hire",
]
