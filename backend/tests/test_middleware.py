from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)

ADA = {"name": "Ada", "email": "ada@example.com", "message": "Hi"}


def _preflight(origin):
    return client.options(
        "/api/contact",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )


def test_preflight_allowed_origin():
    resp = _preflight("https://portfolio.example")

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "https://portfolio.example"
    allowed = {m.strip() for m in resp.headers["access-control-allow-methods"].split(",")}
    assert allowed == {"POST", "OPTIONS"}
    assert resp.headers["x-content-type-options"] == "nosniff"


def test_preflight_disallowed_origin():
    resp = _preflight("https://evil.example")

    assert resp.status_code == 400
    assert "access-control-allow-origin" not in resp.headers


def test_post_from_allowed_origin_gets_cors_header(sender):
    resp = client.post("/api/contact", json=ADA, headers={"Origin": "http://localhost:5173"})

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_post_without_origin_is_allowed(sender):
    resp = client.post("/api/contact", json=ADA)

    assert resp.status_code == 200
    assert "access-control-allow-origin" not in resp.headers


def test_rate_limit_after_ten_requests(sender):
    for _ in range(10):
        assert client.post("/api/contact", json=ADA).status_code == 200

    resp = client.post("/api/contact", json=ADA)

    assert resp.status_code == 429
    assert "Rate limit exceeded" in resp.json()["error"]
    assert len(sender.sent) == 10


def test_rate_limit_counter_shared_across_api_routes(sender):
    for _ in range(10):
        assert client.get("/api/health").status_code == 200

    resp = client.post("/api/contact", json=ADA)

    assert resp.status_code == 429
    assert sender.sent == []


def test_rate_limited_response_keeps_security_headers(sender):
    for _ in range(10):
        client.get("/api/health")

    resp = client.get("/api/health")

    assert resp.status_code == 429
    assert resp.headers["x-frame-options"] == "SAMEORIGIN"


def test_post_from_disallowed_origin_is_rejected(sender):
    resp = client.post("/api/contact", json=ADA, headers={"Origin": "https://evil.example"})

    assert resp.status_code == 403
    assert resp.json() == {"ok": False, "error": "Not allowed by CORS"}
    assert sender.sent == []


def test_text_plain_body_from_disallowed_origin_sends_nothing(sender):
    resp = client.post(
        "/api/contact",
        content=b'{"name": "Ada", "email": "ada@example.com", "message": "Hi"}',
        headers={"Origin": "https://evil.example", "Content-Type": "text/plain"},
    )

    assert resp.status_code == 403
    assert sender.sent == []


def test_text_plain_body_is_treated_as_empty_form(sender):
    resp = client.post(
        "/api/contact",
        content=b'{"name": "Ada", "email": "ada@example.com", "message": "Hi"}',
        headers={"Origin": "https://portfolio.example", "Content-Type": "text/plain"},
    )

    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields"
    assert sender.sent == []


def test_unknown_api_path_is_not_found():
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert resp.json() == {"ok": False, "error": "Not found"}


def test_unknown_api_paths_count_towards_rate_limit():
    for _ in range(10):
        assert client.get("/api/nope").status_code == 404

    resp = client.get("/api/health")

    assert resp.status_code == 429
