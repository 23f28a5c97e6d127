"""
Dashboard page: URL-state handling (month/filter), navigation and rendering.
"""

from fastapi.testclient import TestClient

import config
from app.routes_dashboard import neighbour_months
from tests.factories import add_txn


def test_root_redirects_to_dashboard(client: TestClient):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/dashboard"


def test_missing_month_redirects_to_latest(client: TestClient, seeded):
    response = client.get("/dashboard", params={"filter": "OUT"}, follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/dashboard?month=2024-12&filter=OUT"


def test_no_data_renders_empty_state(client: TestClient):
    response = client.get("/dashboard")
    assert response.status_code == 200
    assert "No transactions recorded yet" in response.text


def test_dashboard_renders_summary_and_rows(client: TestClient, seeded):
    response = client.get("/dashboard", params={"month": "2024-12"})
    assert response.status_code == 200
    html = response.text
    assert "Timeline: December 2024" in html
    assert '<strong id="total-count">2</strong>' in html
    assert "Acme Corp" in html
    assert "Cloud Hosting Ltd" in html
    assert "5,000.00 USD" in html


def test_dashboard_direction_filter(client: TestClient, seeded):
    html = client.get("/dashboard", params={"month": "2024-12", "filter": "IN"}).text
    assert "Acme Corp" in html
    assert "Cloud Hosting Ltd" not in html


def test_unknown_filter_falls_back_to_all(client: TestClient, seeded):
    html = client.get("/dashboard", params={"month": "2024-12", "filter": "SIDEWAYS"}).text
    assert "Acme Corp" in html
    assert "Cloud Hosting Ltd" in html


def test_empty_filter_message(client: TestClient, db_session):
    add_txn(db_session, created_on="2025-03-01", direction="OUT")
    html = client.get("/dashboard", params={"month": "2025-03", "filter": "IN"}).text
    assert "No in transactions found for March 2025" in html


def test_navigation_links(client: TestClient, seeded):
    html = client.get("/dashboard", params={"month": "2024-11", "filter": "IN"}).text
    assert 'href="/dashboard?month=2024-10&amp;filter=IN"' in html
    assert 'href="/dashboard?month=2024-12&amp;filter=IN"' in html


def test_neighbour_months():
    months = ["2024-12", "2024-11", "2024-10"]
    assert neighbour_months(months, "2024-12") == ("2024-11", None)
    assert neighbour_months(months, "2024-11") == ("2024-10", "2024-12")
    assert neighbour_months(months, "2024-10") == (None, "2024-11")
    assert neighbour_months([], "2024-10") == (None, None)


def test_neighbour_months_for_month_without_data():
    # Stepping back from a month that has no data lands on the newest month
    months = ["2024-12", "2024-11", "2024-10"]
    assert neighbour_months(months, "2030-01") == ("2024-12", None)


def test_signed_out_sees_sign_in_prompt(client: TestClient, seeded, monkeypatch):
    monkeypatch.setattr(config, "AUTH_SECRET", "test-secret")
    response = client.get("/dashboard", follow_redirects=False)
    assert response.status_code == 200
    assert "Please sign in to view your transactions." in response.text
    assert "Acme Corp" not in response.text
