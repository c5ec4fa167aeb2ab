import pytest


@pytest.mark.parametrize("path, marker", [
    ("/", "Community-Driven"),
    ("/about", "How It Works"),
    ("/education", "Understanding Waste Segregation"),
    ("/faq", "Frequently Asked Questions"),
])
def test_static_pages_render(client, path, marker):
    response = client.get(path)
    assert response.status_code == 200
    assert marker in response.get_data(as_text=True)


def test_static_pages_are_immutable(client):
    response = client.get("/faq")
    assert response.headers["Cache-Control"] == "public, max-age=31536000, immutable"


def test_static_page_is_built_once(client, monkeypatch):
    import content

    first = client.get("/faq").get_data()
    monkeypatch.setattr(content, "FAQS", [])
    assert client.get("/faq").get_data() == first


def test_unknown_path_is_404(client):
    response = client.get("/no-such-page")
    assert response.status_code == 404
    assert "Page not found" in response.get_data(as_text=True)
    assert "Cache-Control" not in response.headers


def test_home_features_link_to_their_pages(client):
    html = client.get("/").get_data(as_text=True)
    for path in ("/dashboard/household", "/statistics", "/dashboard/reports"):
        assert f'href="{path}"' in html


def test_fault_on_static_page_offers_retry(client, monkeypatch):
    import content

    monkeypatch.setattr(content, "STEPS", None)
    response = client.get("/about")
    html = response.get_data(as_text=True)
    assert response.status_code == 500
    assert 'id="route-error"' in html
    assert 'href="/about"' in html
    assert "Try again" in html
    assert 'id="global-error"' not in html

    assert client.get("/faq").status_code == 200
