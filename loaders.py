# loaders.py
"""Page-level data loaders.

Each loader is a coroutine so a view can await several of them at once.
They currently build view models from ``sample_data``; swapping in real
API calls only changes the bodies here.
"""
import logging
from datetime import datetime

import sample_data
from models import (
    Authority, AuthorityStats, Collector, CollectorLeader, CommunityIssue,
    Events, Household, HouseholdLeader, Leaderboard, MonthlyRate, Notification,
    OverallStats, PastEvent, PendingValidation, RecentIssue, Report,
    UpcomingEvent, WardLeader, WardPerformance, WardStatistics, WardTrend,
    badge_for_rank, ward_status,
)

logger = logging.getLogger(__name__)


def _by_rank(rows: list) -> list:
    return sorted(rows, key=lambda r: r.rank)


# ---------------- Household ----------------
async def get_household_data() -> Household:
    household = Household(last_collection=datetime.now(), **sample_data.HOUSEHOLD)
    logger.debug("household %s: %d activity rows",
                 household.household_id, len(household.recent_activity))
    return household


async def get_notifications() -> list[Notification]:
    return [Notification(**n) for n in sample_data.NOTIFICATIONS]


# ---------------- Collector ----------------
async def get_collector_data() -> Collector:
    return Collector(**sample_data.COLLECTOR)


async def get_pending_validations() -> list[PendingValidation]:
    validations = [PendingValidation(**v) for v in sample_data.PENDING_VALIDATIONS]
    logger.debug("%d pending validations", len(validations))
    return validations


# ---------------- Authority ----------------
async def get_authority_data() -> Authority:
    return Authority(**sample_data.AUTHORITY)


async def get_live_stats() -> AuthorityStats:
    return AuthorityStats(**sample_data.LIVE_STATS)


async def get_ward_performance() -> list[WardPerformance]:
    return [
        WardPerformance(status=ward_status(w["score"]), **w)
        for w in sample_data.WARD_PERFORMANCE
    ]


async def get_recent_issues() -> list[RecentIssue]:
    return [RecentIssue(**i) for i in sample_data.RECENT_ISSUES]


# ---------------- Reports ----------------
async def get_user_reports() -> list[Report]:
    return [Report(**r) for r in sample_data.USER_REPORTS]


async def get_community_issues() -> list[CommunityIssue]:
    return [CommunityIssue(**i) for i in sample_data.COMMUNITY_ISSUES]


# ---------------- Statistics ----------------
async def get_ward_statistics() -> WardStatistics:
    stats = WardStatistics(
        last_updated=datetime.now(),
        overall_stats=OverallStats(**sample_data.OVERALL_STATS),
        ward_data=[WardTrend(**w) for w in sample_data.WARD_TRENDS],
        monthly_trend=[MonthlyRate(**m) for m in sample_data.MONTHLY_TREND],
    )
    logger.debug("ward statistics for %d wards", len(stats.ward_data))
    return stats


async def get_leaderboard_data() -> Leaderboard:
    households = [
        HouseholdLeader(badge=badge_for_rank(h["rank"]), **h)
        for h in sample_data.HOUSEHOLD_LEADERS
    ]
    return Leaderboard(
        last_updated=datetime.now(),
        household_leaders=_by_rank(households),
        ward_leaders=_by_rank([WardLeader(**w) for w in sample_data.WARD_LEADERS]),
        collector_leaders=_by_rank([CollectorLeader(**c) for c in sample_data.COLLECTOR_LEADERS]),
    )


async def get_events() -> Events:
    return Events(
        upcoming=[UpcomingEvent(**e) for e in sample_data.UPCOMING_EVENTS],
        past=[PastEvent(**e) for e in sample_data.PAST_EVENTS],
    )
