import pytest

from arbiter.rank import BADGE_LABELS, badge_for, color_for


@pytest.mark.parametrize(
    "total,badge",
    [(100, "gold"), (90, "gold"), (89, "silver"), (70, "silver"), (69, "bronze"), (0, "bronze")],
)
def test_badge_for(total, badge):
    assert badge_for(total) == badge
    assert badge in BADGE_LABELS


@pytest.mark.parametrize(
    "total,color",
    [(100, "high"), (80, "high"), (79, "med"), (50, "med"), (49, "low"), (0, "low")],
)
def test_color_for(total, color):
    assert color_for(total) == color
