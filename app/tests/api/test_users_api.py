from app.tests.helpers import auth_header

NEW_USER = {
    "firstName": "Bilal",
    "lastName": "Ahmed",
    "email": "bilal@uni.edu",
    "password": "secret123",
    "role": "hod",
    "department": "Civil Engineering",
}


def test_directory_is_public(client, faculty, other_faculty):
    r = client.get("/api/users?department=Electrical%20Engineering")
    users = r.json()["data"]["users"]
    assert [u["email"] for u in users] == ["raza@uni.edu"]
    assert client.get(f"/api/users/{faculty.id}").json()["data"]["user"]["lastName"] == "Khan"
    assert client.get("/api/users/missing").status_code == 404


def test_search_by_name(client, faculty, other_faculty):
    users = client.get("/api/users?search=sara").json()["data"]["users"]
    assert len(users) == 1


def test_admin_manages_accounts(client, admin, faculty):
    r = client.post("/api/users", json=NEW_USER, headers=auth_header(admin))
    assert r.status_code == 201
    created = r.json()["data"]["user"]
    assert created["role"] == "hod"

    r = client.put(f"/api/users/{created['id']}", json={"isActive": False}, headers=auth_header(admin))
    assert r.json()["data"]["user"]["isActive"] is False

    r = client.put(f"/api/users/{faculty.id}", json={"email": "ADMIN@uni.edu"}, headers=auth_header(admin))
    assert r.status_code == 400

    r = client.put(
        f"/api/users/{faculty.id}/reset-password", json={"newPassword": "fresh123"}, headers=auth_header(admin)
    )
    assert r.status_code == 200
    assert client.post("/api/auth/login", json={"email": "khan@uni.edu", "password": "fresh123"}).status_code == 200

    assert client.delete(f"/api/users/{created['id']}", headers=auth_header(admin)).status_code == 200


def test_admin_cannot_delete_self(client, admin):
    r = client.delete(f"/api/users/{admin.id}", headers=auth_header(admin))
    assert r.status_code == 400


def test_faculty_cannot_manage_users(client, faculty):
    assert client.post("/api/users", json=NEW_USER, headers=auth_header(faculty)).status_code == 403
    # role gate runs before the lookup
    assert client.delete("/api/users/missing", headers=auth_header(faculty)).status_code == 403


def test_stats(client, admin, faculty, other_faculty):
    assert client.get("/api/users/stats", headers=auth_header(faculty)).status_code == 403
    out = client.get("/api/users/stats", headers=auth_header(admin)).json()["data"]
    assert out["total"] == 3
    assert out["faculty"] == 2
    assert out["admin"] == 1
    assert out["byDepartment"] == {"Computer Science": 2, "Electrical Engineering": 1}
