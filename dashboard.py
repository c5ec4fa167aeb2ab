# dashboard.py
import asyncio
from datetime import datetime

from flask import Blueprint, render_template

import content
import loaders
from errors import subtree_boundary
from extensions import force_dynamic

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")
dashboard_bp.register_error_handler(Exception, subtree_boundary)


@dashboard_bp.route("", strict_slashes=False)
@force_dynamic
def index():
    return render_template("dashboard/index.html", roles=content.ROLES, quick_links=content.QUICK_LINKS)


@dashboard_bp.route("/household")
@force_dynamic
async def household():
    household, notifications = await asyncio.gather(
        loaders.get_household_data(),
        loaders.get_notifications(),
    )
    return render_template(
        "dashboard/household.html",
        household=household,
        notifications=notifications,
    )


@dashboard_bp.route("/collector")
@force_dynamic
async def collector():
    collector, validations = await asyncio.gather(
        loaders.get_collector_data(),
        loaders.get_pending_validations(),
    )
    return render_template(
        "dashboard/collector.html",
        collector=collector,
        validations=validations,
        completion_rate=collector.today_stats.completion_rate,
        today=datetime.now(),
    )


@dashboard_bp.route("/authority")
@force_dynamic
async def authority():
    authority, stats, ward_performance, recent_issues = await asyncio.gather(
        loaders.get_authority_data(),
        loaders.get_live_stats(),
        loaders.get_ward_performance(),
        loaders.get_recent_issues(),
    )
    return render_template(
        "dashboard/authority.html",
        authority=authority,
        stats=stats,
        ward_performance=ward_performance,
        recent_issues=recent_issues,
        now=datetime.now(),
    )


@dashboard_bp.route("/reports")
@force_dynamic
async def reports():
    user_reports, community_issues = await asyncio.gather(
        loaders.get_user_reports(),
        loaders.get_community_issues(),
    )
    return render_template(
        "dashboard/reports.html",
        user_reports=user_reports,
        community_issues=community_issues,
    )
