# models.py
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, Field

Score = Annotated[int, Field(ge=0, le=100)]
Percent = Annotated[float, Field(ge=0, le=100)]


# ---------------- Derivation rules ----------------
def completion_rate(visited: int, assigned: int) -> int:
    """Share of assigned households visited, as a whole percentage."""
    if assigned <= 0:
        return 0
    # half-up, round() would round 12.5 to 12
    return int(visited / assigned * 100 + 0.5)


def ward_status(score: float) -> str:
    if score >= 90:
        return "excellent"
    if score >= 80:
        return "good"
    if score >= 70:
        return "average"
    return "needs-attention"


def score_tier(score: float) -> str:
    """Colour tier used by the statistics tables."""
    if score >= 85:
        return "high"
    if score >= 70:
        return "medium"
    return "low"


HOUSEHOLD_BADGES = {1: "🥇", 2: "🥈", 3: "🥉", 4: "⭐", 5: "⭐"}
COLLECTOR_MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}


def badge_for_rank(rank: int) -> str:
    return HOUSEHOLD_BADGES.get(rank, "")


# ---------------- Household ----------------
class Activity(BaseModel):
    date: str
    waste_type: str
    validated: bool


class Household(BaseModel):
    household_id: str
    address: str
    segregation_score: Score
    total_logs: int
    current_streak: int
    last_collection: datetime
    recent_activity: list[Activity] = []


class Notification(BaseModel):
    id: int
    message: str
    type: str = "info"


# ---------------- Collector ----------------
class TodayStats(BaseModel):
    households_visited: int
    total_assigned: int
    properly_segregated: int
    issues: int

    @property
    def completion_rate(self) -> int:
        return completion_rate(self.households_visited, self.total_assigned)


class Collector(BaseModel):
    collector_id: str
    name: str
    assigned_ward: str
    today_stats: TodayStats


class PendingValidation(BaseModel):
    id: str
    household_id: str
    address: str
    waste_type: str
    scheduled_time: str
    status: str = "pending"


# ---------------- Authority ----------------
class Authority(BaseModel):
    officer_id: str
    name: str
    jurisdiction: str


class AuthorityStats(BaseModel):
    total_households: int
    active_collectors: int
    today_collections: int
    average_segregation_rate: Percent
    open_issues: int
    resolved_today: int


class WardPerformance(BaseModel):
    ward: str
    score: Score
    households: int
    status: str


class RecentIssue(BaseModel):
    id: str
    ward: str
    type: str
    priority: str
    time: str


# ---------------- Reports ----------------
class Report(BaseModel):
    id: str
    title: str
    type: str
    status: str
    created_at: str
    resolved_at: Optional[str] = None


class CommunityIssue(BaseModel):
    id: str
    title: str
    ward: str
    reported_by: str
    upvotes: int
    status: str


# ---------------- Statistics ----------------
class OverallStats(BaseModel):
    total_households: int
    participating_households: int
    average_segregation_rate: Percent
    wet_waste_collected: str
    dry_waste_recycled: str
    issues_resolved: int


class WardTrend(BaseModel):
    ward: str
    score: Score
    households: int
    trend: str
    change: int

    @property
    def tier(self) -> str:
        return score_tier(self.score)


class MonthlyRate(BaseModel):
    month: str
    rate: Score


class WardStatistics(BaseModel):
    last_updated: datetime
    overall_stats: OverallStats
    ward_data: list[WardTrend]
    monthly_trend: list[MonthlyRate]


# ---------------- Leaderboard ----------------
class HouseholdLeader(BaseModel):
    rank: int
    name: str
    ward: str
    score: Score
    streak: int
    badge: str = ""


class WardLeader(BaseModel):
    rank: int
    ward: str
    score: Score
    households: int
    improvement: int


class CollectorLeader(BaseModel):
    rank: int
    name: str
    validations: int
    accuracy: Percent

    @property
    def medal(self) -> str:
        return COLLECTOR_MEDALS.get(self.rank, "")


class Leaderboard(BaseModel):
    last_updated: datetime
    household_leaders: list[HouseholdLeader]
    ward_leaders: list[WardLeader]
    collector_leaders: list[CollectorLeader]


# ---------------- Events ----------------
class UpcomingEvent(BaseModel):
    id: str
    title: str
    date: str
    time: str
    location: str
    description: str
    type: str


class PastEvent(BaseModel):
    id: str
    title: str
    date: str
    type: str
    participants: int
    waste_collected: Optional[str] = None
    schools: Optional[int] = None


class Events(BaseModel):
    upcoming: list[UpcomingEvent]
    past: list[PastEvent]
