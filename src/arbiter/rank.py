"""
Display bands for a sample's total score.

Badges rank samples on the leaderboard; colours tint the score ring / pill.
"""


from __future__ import annotations


BADGE_LABELS = {
    "gold": "GOLD",
    "silver": "SILVER",
    "bronze": "BRONZE",
}


def badge_for(total: int) -> str:
    if total >= 90:
        return "gold"
    if total >= 70:
        return "silver"
    return "bronze"


def color_for(total: int) -> str:
    if total >= 80:
        return "high"
    if total >= 50:
        return "med"
    return "low"
