import pytest

import loaders


@pytest.mark.parametrize("path, heading, header", [
    ("/statistics", "Ward Statistics", "public, s-maxage=300, stale-while-revalidate"),
    ("/statistics/leaderboard", "Community Leaderboard", "public, s-maxage=600, stale-while-revalidate"),
    ("/statistics/events", "Events &amp; Awareness Drives", "public, s-maxage=3600, stale-while-revalidate"),
])
def test_statistics_pages(client, path, heading, header):
    response = client.get(path)
    assert response.status_code == 200
    assert heading in response.get_data(as_text=True)
    assert response.headers["Cache-Control"] == header


@pytest.mark.parametrize("path, loader", [
    ("/statistics", "get_ward_statistics"),
    ("/statistics/leaderboard", "get_leaderboard_data"),
    ("/statistics/events", "get_events"),
])
def test_pages_are_served_from_cache(client, monkeypatch, path, loader):
    first = client.get(path).get_data()

    async def changed():
        raise AssertionError("loader should not run within the interval")

    monkeypatch.setattr(loaders, loader, changed)
    second = client.get(path)
    assert second.status_code == 200
    assert second.get_data() == first


def test_intervals_follow_app_config():
    from app import create_app

    client = create_app({
        "TESTING": True,
        "STATISTICS_REVALIDATE": 5,
        "EVENTS_REVALIDATE": 60,
    }).test_client()

    assert client.get("/statistics").headers["Cache-Control"] == "public, s-maxage=5, stale-while-revalidate"
    assert client.get("/statistics/events").headers["Cache-Control"] == "public, s-maxage=60, stale-while-revalidate"
    routes = client.get("/health").get_json()["routes"]
    assert routes["/statistics"] == "revalidate=5"
    assert routes["/statistics/events"] == "revalidate=60"
    assert routes["/statistics/leaderboard"] == "revalidate=600"


def test_overview_table(client):
    html = client.get("/statistics").get_data(as_text=True)
    assert html.count('class="ward-row') == 8
    assert html.count('class="month-bar') == 6
    assert "↑ +3%" in html
    assert "↓ -4%" in html
    assert "→ No change" in html
    assert "52,340" in html


def test_leaderboard_order_and_badges(client):
    html = client.get("/statistics/leaderboard").get_data(as_text=True)
    assert html.count('class="household-row') == 10
    assert html.index("Sharma Family") < html.index("Patel Residence") < html.index("Iyer Residence")
    assert html.index("🥇") < html.index("🥈") < html.index("🥉")
    assert html.count('class="collector-card') == 3


def test_events_optional_fields(client):
    html = client.get("/statistics/events").get_data(as_text=True)
    assert html.count('class="event-card') == 3
    assert html.count('class="past-event') == 2
    assert html.count("Waste Collected") == 1
    assert html.count("Schools") == 1


def test_cache_is_per_app(app, monkeypatch):
    from app import create_app

    app.test_client().get("/statistics/events")

    async def broken():
        raise RuntimeError("events feed down")

    monkeypatch.setattr(loaders, "get_events", broken)
    response = create_app({"TESTING": True}).test_client().get("/statistics/events")
    assert response.status_code == 500
    assert "Try again" in response.get_data(as_text=True)
