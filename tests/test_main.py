import pytest
from fastapi.testclient import TestClient

from vacation_planner.main import app, get_store
from conftest import FRANCE, NO_RESULTS, PARIS, RATES, weather_answer

FORM = {
    "city": "Paris",
    "start_date": "2026-06-01",
    "end_date": "2026-06-02",
    "activity_type": "hiking",
    "vacation_type": "beach",
}


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_static_pages(client):
    for path in ("/", "/result", "/about"):
        r = client.get(path)
        assert r.status_code == 200
        assert "<html" in r.text


def test_unknown_route(client):
    r = client.get("/nowhere")
    assert r.status_code == 404
    assert r.text == "404"


def test_post_renders_result(client, paris):
    r = client.post("/", data=FORM)
    assert r.status_code == 200
    assert "Paris, France" in r.text
    assert "Mon Jun 01" in r.text and "Tue Jun 02" in r.text
    assert "<b>(1 USD = 0.92 EUR)</b>" in r.text
    assert "AND, BEL, DEU" in r.text
    assert "Insect repellent" in r.text


def test_post_unknown_city_renders_error(client, api):
    api.add("geo.test", NO_RESULTS)
    r = client.post("/", data=dict(FORM, city="Atlantis"))
    assert r.status_code == 500
    assert "Location not found: Atlantis" in r.text


def test_post_bad_date_renders_error(client, api):
    r = client.post("/", data=dict(FORM, start_date="next week"))
    assert r.status_code == 500
    assert api.calls == []


def test_post_without_database(api):
    app.dependency_overrides[get_store] = lambda: None
    try:
        r = TestClient(app).post("/", data=FORM)
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert "DATABASE_URL" in r.text


def test_post_malformed_geocode_renders_error_page(client, api):
    broken = dict(PARIS["results"][0], address_components=None)
    api.add("geo.test", {"status": "OK", "results": [broken]})
    r = client.post("/", data=FORM)
    assert r.status_code == 500
    assert "Something went wrong" in r.text
    assert "geocode" in r.text


def test_post_malformed_country_renders_error_page(client, api):
    api.add("geo.test", PARIS)
    api.add("countries.test", dict(FRANCE, currencies={"EUR": {"name": "Euro"}}))
    api.add("rates.test", RATES)
    api.add("weather.test", weather_answer)
    r = client.post("/", data=FORM)
    assert r.status_code == 500
    assert "Something went wrong" in r.text
    assert "countries" in r.text
