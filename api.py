# api.py
import asyncio

from flask import Blueprint, current_app, jsonify

import loaders
from errors import api_boundary
from extensions import describe_cadence

api_bp = Blueprint("api", __name__)
api_bp.register_error_handler(Exception, api_boundary)


def _dump(model):
    if isinstance(model, list):
        return [m.model_dump(mode="json") for m in model]
    return model.model_dump(mode="json")


# ---------------- Health ----------------
@api_bp.route("/health")
def health():
    routes = {}
    for rule in current_app.url_map.iter_rules():
        view = current_app.view_functions.get(rule.endpoint)
        interval = getattr(view, "revalidate", None)
        if interval is not None:
            routes[rule.rule] = describe_cadence(interval)
    return jsonify({"status": "ok", "routes": routes})


# ---------------- Dashboards ----------------
@api_bp.route("/api/dashboard/household")
async def api_household():
    household, notifications = await asyncio.gather(
        loaders.get_household_data(), loaders.get_notifications()
    )
    return jsonify({"ok": True, "household": _dump(household), "notifications": _dump(notifications)})


@api_bp.route("/api/dashboard/collector")
async def api_collector():
    collector, validations = await asyncio.gather(
        loaders.get_collector_data(), loaders.get_pending_validations()
    )
    return jsonify({
        "ok": True,
        "collector": _dump(collector),
        "completion_rate": collector.today_stats.completion_rate,
        "validations": _dump(validations),
    })


@api_bp.route("/api/dashboard/authority")
async def api_authority():
    authority, stats, wards, issues = await asyncio.gather(
        loaders.get_authority_data(),
        loaders.get_live_stats(),
        loaders.get_ward_performance(),
        loaders.get_recent_issues(),
    )
    return jsonify({
        "ok": True,
        "authority": _dump(authority),
        "stats": _dump(stats),
        "ward_performance": _dump(wards),
        "recent_issues": _dump(issues),
    })


@api_bp.route("/api/dashboard/reports")
async def api_reports():
    reports, issues = await asyncio.gather(
        loaders.get_user_reports(), loaders.get_community_issues()
    )
    return jsonify({"ok": True, "reports": _dump(reports), "community_issues": _dump(issues)})


# ---------------- Statistics ----------------
@api_bp.route("/api/statistics")
async def api_statistics():
    return jsonify({"ok": True, **_dump(await loaders.get_ward_statistics())})


@api_bp.route("/api/statistics/leaderboard")
async def api_leaderboard():
    return jsonify({"ok": True, **_dump(await loaders.get_leaderboard_data())})


@api_bp.route("/api/statistics/events")
async def api_events():
    return jsonify({"ok": True, **_dump(await loaders.get_events())})
