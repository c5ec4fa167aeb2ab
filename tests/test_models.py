import asyncio
import random

import pytest
from pydantic import ValidationError

import loaders
import sample_data
from models import (
    Household, badge_for_rank, completion_rate, score_tier, ward_status,
)
from styles import TABLES, status_label, style_for


def test_completion_rate():
    assert completion_rate(45, 120) == 38
    assert completion_rate(1, 8) == 13
    assert completion_rate(5, 0) == 0
    assert completion_rate(0, 10) == 0


@pytest.mark.parametrize("score, status", [
    (100, "excellent"), (90, "excellent"), (89.9, "good"), (80, "good"),
    (79, "average"), (70, "average"), (69, "needs-attention"), (0, "needs-attention"),
])
def test_ward_status(score, status):
    assert ward_status(score) == status


def test_score_tier():
    assert score_tier(85) == "high"
    assert score_tier(84) == "medium"
    assert score_tier(70) == "medium"
    assert score_tier(69) == "low"


def test_badges():
    assert [badge_for_rank(r) for r in range(1, 7)] == ["🥇", "🥈", "🥉", "⭐", "⭐", ""]


def test_score_out_of_range_rejected():
    data = dict(sample_data.HOUSEHOLD, segregation_score=120)
    with pytest.raises(ValidationError):
        Household(last_collection="2026-01-20T08:00:00", **data)


def test_leaderboard_sorted_by_rank(monkeypatch):
    shuffled = list(sample_data.HOUSEHOLD_LEADERS)
    random.Random(7).shuffle(shuffled)
    monkeypatch.setattr(sample_data, "HOUSEHOLD_LEADERS", shuffled)

    board = asyncio.run(loaders.get_leaderboard_data())
    assert [h.rank for h in board.household_leaders] == list(range(1, 11))
    assert board.household_leaders[0].badge == "🥇"
    assert board.collector_leaders[0].medal == "🥇"


def test_every_sample_value_has_a_style():
    checks = [
        ("waste_type", [a["waste_type"] for a in sample_data.HOUSEHOLD["recent_activity"]]),
        ("notification", [n["type"] for n in sample_data.NOTIFICATIONS]),
        ("priority", [i["priority"] for i in sample_data.RECENT_ISSUES]),
        ("report_status", [r["status"] for r in sample_data.USER_REPORTS + sample_data.COMMUNITY_ISSUES]),
        ("event_type", [e["type"] for e in sample_data.UPCOMING_EVENTS + sample_data.PAST_EVENTS]),
        ("ward_status", ["excellent", "good", "average", "needs-attention"]),
    ]
    for kind, values in checks:
        for value in values:
            assert value in TABLES[kind], (kind, value)


def test_style_falls_back_to_default():
    assert style_for("priority", "HIGH") == TABLES["priority"]["high"]
    assert style_for("priority", "urgent") == TABLES["priority"]["default"]
    assert style_for("ward_rank", 9) == TABLES["ward_rank"]["default"]


def test_status_label():
    assert status_label("in-progress") == "in progress"
    assert status_label("under-review") == "under review"
