from app.tests.helpers import auth_header, contact_body


def submit(client, **overrides):
    r = client.post("/api/contacts", json=contact_body(**overrides))
    assert r.status_code == 201, r.text
    return r.json()["data"]["contact"]


def test_public_submission_returns_receipt(client):
    contact = submit(client)
    assert set(contact) == {"id", "status", "createdAt"}
    assert contact["status"] == "new"


def test_invalid_phone(client):
    r = client.post("/api/contacts", json=contact_body(phone="call me"))
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "phone"


def test_inbox_is_admin_only(client, faculty):
    contact = submit(client)
    assert client.get("/api/contacts").status_code == 401
    assert client.get("/api/contacts", headers=auth_header(faculty)).status_code == 403
    assert client.get(f"/api/contacts/{contact['id']}", headers=auth_header(faculty)).status_code == 403


def test_respond_resolve_close(client, admin):
    contact = submit(client)
    url = f"/api/contacts/{contact['id']}"

    r = client.put(f"{url}/respond", json={"message": "We will call you."}, headers=auth_header(admin))
    out = r.json()["data"]["contact"]
    assert out["status"] == "responded"
    assert out["response"]["message"] == "We will call you."

    assert client.put(f"{url}/resolve", headers=auth_header(admin)).json()["data"]["contact"]["status"] == "resolved"
    assert client.put(f"{url}/close", headers=auth_header(admin)).json()["data"]["contact"]["status"] == "closed"


def test_admin_update_and_delete(client, admin):
    contact = submit(client)
    url = f"/api/contacts/{contact['id']}"
    r = client.put(url, json={"priority": "urgent", "assignedTo": admin.id}, headers=auth_header(admin))
    out = r.json()["data"]["contact"]
    assert out["priority"] == "urgent"
    assert out["firstName"] == "Zara"

    assert client.delete(url, headers=auth_header(admin)).status_code == 200
    assert client.get(url, headers=auth_header(admin)).status_code == 404


def test_bulk_update(client, admin):
    ids = [submit(client)["id"], submit(client, email="second@example.com")["id"]]
    r = client.put(
        "/api/contacts/bulk/update",
        json={"contactIds": ids + ["00000000-0000-0000-0000-000000000000"], "updates": {"priority": "high"}},
        headers=auth_header(admin),
    )
    assert r.status_code == 200
    assert r.json()["data"] == {"matchedCount": 2, "modifiedCount": 2}

    listed = client.get("/api/contacts?priority=high", headers=auth_header(admin)).json()["data"]
    assert listed["pagination"]["total"] == 2


def test_stats(client, admin):
    submit(client, priority="urgent")
    out = client.get("/api/contacts/stats", headers=auth_header(admin)).json()["data"]
    assert out["overview"]["totalContacts"] == 1
    assert out["overview"]["urgentContacts"] == 1
