"""Auth endpoints and request guards."""


def test_register_logs_in(client):
    resp = client.post("/api/register", json={"username": "carol", "password": "pw1"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["user"]["role"] == "creator"
    assert body["user"]["active"] is True
    assert "password" not in body["user"]

    me = client.get(
        "/api/user", headers={"Authorization": f"Bearer {body['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["username"] == "carol"


def test_register_duplicate(client):
    assert client.post("/api/register", json={"username": "carol", "password": "a"}).status_code == 201
    resp = client.post("/api/register", json={"username": "carol", "password": "b"})
    assert resp.status_code == 409
    assert resp.json()["code"] == "username_taken"


def test_register_requires_fields(client):
    assert client.post("/api/register", json={"username": "carol"}).status_code == 422
    assert client.post(
        "/api/register", json={"username": "carol", "password": "x", "role": "owner"}
    ).status_code == 422


def test_login_failures_are_indistinguishable(client, creator):
    bad_pw = client.post("/api/login", json={"username": "alice", "password": "nope"})
    no_user = client.post("/api/login", json={"username": "ghost", "password": "nope"})
    assert bad_pw.status_code == no_user.status_code == 401
    assert bad_pw.json() == no_user.json()
    assert bad_pw.headers["WWW-Authenticate"] == "Bearer"


def test_session_cookie_works(client, creator):
    resp = client.post("/api/login", json={"username": "alice", "password": "secret1"})
    assert resp.status_code == 200
    # no Authorization header; the client replays the session cookie
    assert client.get("/api/users/me").json()["id"] == creator.id


def test_logout_ends_session(client, creator, login_as):
    headers = login_as("alice", "secret1")
    client.cookies.clear()
    assert client.post("/api/logout", headers=headers).status_code == 200
    assert client.get("/api/user", headers=headers).status_code == 401
    # second logout is harmless
    assert client.post("/api/logout", headers=headers).status_code == 200


def test_anonymous_requests_rejected(client):
    client.cookies.clear()
    for method, path in [
        ("get", "/api/user"),
        ("get", "/api/students"),
        ("post", "/api/courses"),
        ("get", "/api/admin/creators"),
        ("post", "/api/pricing/upgrade"),
    ]:
        resp = getattr(client, method)(path)
        assert resp.status_code == 401, path


def test_garbage_token_rejected(client):
    client.cookies.clear()
    resp = client.get("/api/user", headers={"Authorization": "Bearer not-a-session"})
    assert resp.status_code == 401


def test_creator_cannot_use_admin_routes(client, creator, login_as):
    headers = login_as("alice", "secret1")
    assert client.get("/api/admin/creators", headers=headers).status_code == 403
    assert client.get("/api/admin/stats", headers=headers).status_code == 403


def test_admin_cannot_upgrade_plans(client, admin_user, login_as):
    headers = login_as("root", "rootpass")
    assert client.post("/api/pricing/upgrade", json={"planId": 1}, headers=headers).status_code == 403


def test_disabled_creator_locked_out_of_existing_session(client, admin_user, creator, login_as):
    alice = login_as("alice", "secret1")
    admin = login_as("root", "rootpass")
    client.cookies.clear()

    assert client.post(f"/api/admin/creators/{creator.id}/toggle", headers=admin).status_code == 200

    resp = client.get("/api/students", headers=alice)
    assert resp.status_code == 403
    assert resp.json()["code"] == "account_disabled"
    # identity is still readable
    assert client.get("/api/user", headers=alice).json()["active"] is False

    login = client.post("/api/login", json={"username": "alice", "password": "secret1"})
    assert login.status_code == 403


def test_health(client):
    assert client.get("/api/health/live").json() == {"status": "ok"}
    assert client.get("/api/health/db").json() == {"status": "ok"}


def test_validation_errors_are_structured(client):
    resp = client.post("/api/login", json={"username": "alice"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "invalid_input"
    assert any(err["loc"][-1] == "password" for err in body["detail"])
