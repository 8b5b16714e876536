def test_login_sets_session(client):
    resp = client.post("/auth/login", json={"loginId": "aoi", "password": "aoi-pass"})
    assert resp.status_code == 200
    assert resp.get_json()["user"] == {"id": 2, "name": "Aoi", "role": "MEMBER", "storeId": 1}

    me = client.get("/auth/me")
    assert me.get_json()["id"] == 2


def test_wrong_password_is_401(client):
    resp = client.post("/auth/login", json={"loginId": "aoi", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_logout_clears_session(client):
    client.post("/auth/login", json={"loginId": "aoi", "password": "aoi-pass"})
    client.post("/auth/logout")
    assert client.get("/auth/me").status_code == 401


def test_anonymous_request_is_401(client):
    assert client.get("/users/2/settings").status_code == 401


def test_non_json_body_is_400(client, login):
    login(2)
    resp = client.post("/users/2/shifts", data="not json", content_type="text/plain")
    assert resp.status_code == 400
