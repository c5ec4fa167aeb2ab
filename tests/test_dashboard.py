import pytest

import loaders
from errors import RenderFault


@pytest.mark.parametrize("path, heading", [
    ("/dashboard", "Welcome to WasteWise"),
    ("/dashboard/household", "Household Dashboard"),
    ("/dashboard/collector", "Collector Dashboard"),
    ("/dashboard/authority", "Authority Dashboard"),
    ("/dashboard/reports", "Issues &amp; Reports"),
])
def test_dashboards_render_fresh(client, path, heading):
    response = client.get(path)
    assert response.status_code == 200
    assert heading in response.get_data(as_text=True)
    assert response.headers["Cache-Control"] == "no-store, must-revalidate"


def test_household_lists_notifications_and_activity(client):
    html = client.get("/dashboard/household").get_data(as_text=True)
    assert 'id="notifications"' in html
    assert "12-day segregation streak" in html
    assert html.count('class="activity-row') == 5


def test_household_without_notifications(client, monkeypatch):
    async def no_notifications():
        return []

    monkeypatch.setattr(loaders, "get_notifications", no_notifications)
    response = client.get("/dashboard/household")
    assert response.status_code == 200
    assert 'id="notifications"' not in response.get_data(as_text=True)


def test_collector_completion_rate(client):
    html = client.get("/dashboard/collector").get_data(as_text=True)
    assert 'id="completion-rate">38%' in html
    assert html.count('class="validation-row') == 4


def test_authority_ward_status_follows_score(client):
    html = client.get("/dashboard/authority").get_data(as_text=True)
    assert html.count('class="ward-row') == 6
    for status in ("excellent", "good", "average", "needs-attention"):
        assert f'data-status="{status}"' in html
    assert "Segregation Heatmap" in html


def test_reports_with_no_community_issues(client, monkeypatch):
    async def no_issues():
        return []

    monkeypatch.setattr(loaders, "get_community_issues", no_issues)
    html = client.get("/dashboard/reports").get_data(as_text=True)
    assert 'id="community-issues"' in html
    assert 'class="community-row' not in html
    assert html.count('class="report-row') == 3


def test_fault_stays_inside_dashboard(client, monkeypatch):
    async def broken():
        raise RenderFault("Collector feed unavailable", digest="abc123")

    monkeypatch.setattr(loaders, "get_collector_data", broken)

    response = client.get("/dashboard/collector")
    html = response.get_data(as_text=True)
    assert response.status_code == 500
    assert "Collector feed unavailable" in html
    assert "abc123" in html
    assert 'href="/dashboard/collector"' in html
    assert "Try again" in html
    assert "Cache-Control" not in response.headers

    assert client.get("/dashboard/household").status_code == 200


def test_fault_without_message_gets_defaults(client, monkeypatch):
    async def broken():
        raise RuntimeError()

    monkeypatch.setattr(loaders, "get_user_reports", broken)
    response = client.get("/dashboard/reports")
    assert response.status_code == 500
    assert "An unexpected error occurred." in response.get_data(as_text=True)
    assert "Reference:" in response.get_data(as_text=True)


@pytest.mark.parametrize("path", ["/dashboard/", "/statistics/"])
def test_trailing_slash_reaches_section_index(client, path):
    response = client.get(path, follow_redirects=True)
    assert response.status_code == 200
