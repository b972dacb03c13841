"""Tests for the static fallback page."""
import pytest

GUID = "2e752824-1657-4c7f-844b-6ec2e168e99c"


def assert_static_page(response):
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<title>People</title>" in response.text


@pytest.mark.parametrize("method,path", [
    ("GET", "/"),
    ("GET", "/index.html"),
    ("GET", "/api"),
    ("GET", "/api/users/"),
    ("GET", "/api/users/123"),
    ("GET", f"/api/users/{GUID}/extra"),
    ("DELETE", "/api/users/not-an-id"),
    ("DELETE", "/api/users"),
    ("POST", f"/api/users/{GUID}"),
    ("PUT", f"/api/users/{GUID}"),
    ("PATCH", "/api/users"),
    ("POST", "/somewhere/else"),
])
def test_unmatched_requests_get_static_page(client, method, path):
    assert_static_page(client.request(method, path))


def test_unmatched_request_does_not_touch_store(client, store):
    client.request("POST", f"/api/users/{GUID}", json={"name": "Ann", "age": 30})
    assert len(store) == 0


def test_custom_static_page(make_client, tmp_path):
    page = tmp_path / "index.html"
    page.write_text("<html><title>People</title><body>custom</body></html>", encoding="utf-8")

    client = make_client(static_index_path=page)
    response = client.get("/anything")

    assert_static_page(response)
    assert "custom" in response.text


def test_missing_static_page_is_server_error(make_client, tmp_path):
    client = make_client(static_index_path=tmp_path / "missing.html")
    response = client.get("/")
    assert response.status_code == 500
    assert response.json() == {"message": "static page not available"}
