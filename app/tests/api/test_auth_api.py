from app.tests.helpers import auth_header

REGISTER = {
    "firstName": "Nadia",
    "lastName": "Malik",
    "email": "Nadia@Uni.edu",
    "password": "secret123",
    "department": "Software Engineering",
}


def test_register_then_login(client):
    r = client.post("/api/auth/register", json=REGISTER)
    assert r.status_code == 201
    data = r.json()["data"]
    assert data["token"]
    assert data["user"]["email"] == "nadia@uni.edu"
    assert data["user"]["role"] == "faculty"
    assert "passwordHash" not in data["user"]

    r = client.post("/api/auth/login", json={"email": "nadia@uni.edu", "password": "secret123"})
    assert r.status_code == 200
    assert r.json()["message"] == "Login successful"


def test_duplicate_email_is_rejected(client, faculty):
    r = client.post("/api/auth/register", json={**REGISTER, "email": "KHAN@uni.edu"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "email"


def test_login_failures(client, faculty, db):
    r = client.post("/api/auth/login", json={"email": "khan@uni.edu", "password": "wrong-pass"})
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid email or password"

    faculty.is_active = False
    db.commit()
    r = client.post("/api/auth/login", json={"email": "khan@uni.edu", "password": "secret123"})
    assert r.status_code == 401
    assert r.json()["message"] == "Account is deactivated"


def test_me_and_profile(client, faculty):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer junk"}).status_code == 401

    me = client.get("/api/auth/me", headers=auth_header(faculty)).json()["data"]["user"]
    assert me["fullName"] == "Ali Khan"

    r = client.put("/api/auth/profile", json={"bio": "Works on ML"}, headers=auth_header(faculty))
    user = r.json()["data"]["user"]
    assert user["bio"] == "Works on ML"
    assert user["firstName"] == "Ali"


def test_change_password(client, faculty):
    bad = client.put(
        "/api/auth/change-password",
        json={"currentPassword": "nope", "newPassword": "another1"},
        headers=auth_header(faculty),
    )
    assert bad.status_code == 400

    good = client.put(
        "/api/auth/change-password",
        json={"currentPassword": "secret123", "newPassword": "another1"},
        headers=auth_header(faculty),
    )
    assert good.status_code == 200
    r = client.post("/api/auth/login", json={"email": "khan@uni.edu", "password": "another1"})
    assert r.status_code == 200


def test_logout(client, faculty):
    r = client.post("/api/auth/logout", headers=auth_header(faculty))
    assert r.json() == {"success": True, "message": "Logout successful"}
