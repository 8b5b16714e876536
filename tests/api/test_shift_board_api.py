from src.parlor_staff.parlor_staff.core.enums import Role


def test_member_sees_own_store_board_only(client, login):
    login(2, store_id=1)
    resp = client.get("/stores/1/shift-board?startDate=2026-03-16&endDate=2026-03-31")
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["half"] == "second"
    assert len(body["requirements"]) == 32

    assert client.get("/stores/2/shift-board").status_code == 403


def test_requirement_upsert_requires_admin(client, login):
    payload = {"targetDate": "2026-03-20", "shiftType": "LATE", "startRequired": 5, "endRequired": 2}

    login(2)
    assert client.put("/stores/1/shift-requirements", json=payload).status_code == 403

    login(1, Role.ADMIN)
    resp = client.put("/stores/1/shift-requirements", json=payload)
    assert resp.status_code == 200
    assert resp.get_json()["startRequired"] == 5
