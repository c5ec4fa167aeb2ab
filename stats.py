# stats.py
from flask import Blueprint, render_template

import loaders
from errors import subtree_boundary
from extensions import revalidate

stats_bp = Blueprint("stats", __name__, url_prefix="/statistics")
stats_bp.register_error_handler(Exception, subtree_boundary)


@stats_bp.route("", strict_slashes=False)
@revalidate("STATISTICS_REVALIDATE")
async def overview():
    stats = await loaders.get_ward_statistics()
    return render_template("statistics/overview.html", stats=stats)


@stats_bp.route("/leaderboard")
@revalidate("LEADERBOARD_REVALIDATE")
async def leaderboard():
    data = await loaders.get_leaderboard_data()
    return render_template("statistics/leaderboard.html", data=data)


@stats_bp.route("/events")
@revalidate("EVENTS_REVALIDATE")
async def events():
    events = await loaders.get_events()
    return render_template("statistics/events.html", events=events)
