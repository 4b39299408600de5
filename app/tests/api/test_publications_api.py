from app.services.publication_service import PublicationService
from app.tests.helpers import auth_header, publication_body

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def create(client, user, **overrides):
    r = client.post("/api/publications", json=publication_body(**overrides), headers=auth_header(user))
    assert r.status_code == 201, r.text
    return r.json()["data"]["publication"]


def test_create_requires_token(client):
    r = client.post("/api/publications", json=publication_body())
    assert r.status_code == 401
    assert r.json()["success"] is False


def test_create_defaults_to_draft(client, faculty):
    pub = create(client, faculty)

    assert pub["status"] == "Draft"
    assert pub["totalAuthors"] == 1
    assert pub["submittedBy"]["id"] == faculty.id
    assert pub["submittedBy"]["firstName"] == "Ali"


def test_create_reports_every_invalid_field(client, faculty):
    r = client.post(
        "/api/publications",
        json={"title": "abc", "publicationType": "Blog"},
        headers=auth_header(faculty),
    )
    assert r.status_code == 400
    fields = {e["field"] for e in r.json()["errors"]}
    assert {"title", "publicationType", "publicationDate", "department"} <= fields


def test_list_falls_back_on_bad_paging(client, faculty):
    for i in range(3):
        create(client, faculty, title=f"Survey number {i}")

    r = client.get("/api/publications?page=0&limit=-1")
    body = r.json()["data"]
    assert r.status_code == 200
    assert len(body["publications"]) == 3
    assert body["pagination"]["currentPage"] == 1
    assert body["pagination"]["total"] == 3


def test_search_without_matches(client, faculty):
    create(client, faculty)
    body = client.get("/api/publications?search=quantum").json()["data"]
    assert body["publications"] == []
    assert body["pagination"]["totalPages"] == 0
    assert body["pagination"]["hasNextPage"] is False


def test_year_filter(client, faculty):
    create(client, faculty)
    create(client, faculty, title="Older results paper", publicationDate="2019-05-01T00:00:00Z")

    r = client.get("/api/publications?year=2019")
    assert [p["title"] for p in r.json()["data"]["publications"]] == ["Older results paper"]

    assert client.get("/api/publications?year=abc").status_code == 400


def test_unknown_id_wins_over_ownership(client, faculty, other_faculty):
    create(client, faculty)
    r = client.put(f"/api/publications/{MISSING_ID}", json={"title": "Changed title"}, headers=auth_header(other_faculty))
    assert r.status_code == 404
    assert r.json()["message"] == "Publication not found"


def test_non_owner_cannot_update_or_delete(client, faculty, other_faculty):
    pub = create(client, faculty)
    url = f"/api/publications/{pub['id']}"

    assert client.put(url, json={"title": "Hijacked title"}, headers=auth_header(other_faculty)).status_code == 403
    assert client.delete(url, headers=auth_header(other_faculty)).status_code == 403


def test_listed_faculty_author_can_edit(client, faculty, other_faculty):
    pub = create(client, faculty, authors=[{"name": "Sara Raza", "authorOrder": 1, "faculty": other_faculty.id}])
    r = client.put(
        f"/api/publications/{pub['id']}", json={"title": "Co-author revision"}, headers=auth_header(other_faculty)
    )
    assert r.status_code == 200
    assert r.json()["data"]["publication"]["title"] == "Co-author revision"


def test_update_ignores_review_fields(client, faculty, admin):
    pub = create(client, faculty)
    r = client.put(
        f"/api/publications/{pub['id']}",
        json={"title": "Revised crop yield study", "reviewedBy": admin.id, "status": "Submitted"},
        headers=auth_header(faculty),
    )
    out = r.json()["data"]["publication"]
    assert r.status_code == 200
    assert out["title"] == "Revised crop yield study"
    assert out["status"] == "Submitted"
    assert out["reviewedBy"] is None


def test_approve_requires_admin_and_is_one_shot(client, faculty, admin):
    pub = create(client, faculty)
    url = f"/api/publications/{pub['id']}/approve"

    assert client.put(url, headers=auth_header(faculty)).status_code == 403

    r = client.put(url, json={"comments": "Accepted"}, headers=auth_header(admin))
    out = r.json()["data"]["publication"]
    assert r.status_code == 200
    assert out["status"] == "Approved"
    assert out["reviewedBy"]["id"] == admin.id
    assert out["approvedDate"] is not None

    assert client.put(url, headers=auth_header(admin)).status_code == 400
    assert client.put(f"/api/publications/{pub['id']}/reject", headers=auth_header(admin)).status_code == 400


def test_review_sets_any_status(client, faculty, admin):
    pub = create(client, faculty)
    r = client.put(
        f"/api/publications/{pub['id']}/review",
        json={"status": "Published", "reviewComments": "ok"},
        headers=auth_header(admin),
    )
    out = r.json()["data"]["publication"]
    assert out["status"] == "Published"
    assert out["reviewDate"] is not None


def test_owner_delete_then_gone(client, faculty):
    pub = create(client, faculty)
    url = f"/api/publications/{pub['id']}"
    r = client.delete(url, headers=auth_header(faculty))
    assert r.json() == {"success": True, "message": "Publication deleted successfully"}
    assert client.get(url).status_code == 404


def test_stats(client, faculty):
    create(client, faculty)
    out = client.get("/api/publications/stats").json()["data"]
    assert out["total"] == 1
    assert out["draft"] == 1
    assert out["byType"] == {"Journal Article": 1}


def test_owner_cannot_create_in_approved_status(client, faculty):
    r = client.post(
        "/api/publications", json=publication_body(status="Published"), headers=auth_header(faculty)
    )
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "status"


def test_owner_cannot_self_approve_through_update(client, faculty):
    pub = create(client, faculty)
    url = f"/api/publications/{pub['id']}"

    for status in ("Approved", "Rejected"):
        r = client.put(url, json={"status": status}, headers=auth_header(faculty))
        assert r.status_code == 400
        assert r.json()["errors"][0]["field"] == "status"

    out = client.get(url).json()["data"]["publication"]
    assert out["status"] == "Draft"
    assert out["approvedDate"] is None


def test_admin_may_set_status_on_update(client, faculty, admin):
    pub = create(client, faculty)
    r = client.put(f"/api/publications/{pub['id']}", json={"status": "Published"}, headers=auth_header(admin))
    assert r.status_code == 200
    assert r.json()["data"]["publication"]["status"] == "Published"


def test_approved_owner_can_still_edit_other_fields(client, faculty, admin):
    pub = create(client, faculty)
    client.put(f"/api/publications/{pub['id']}/approve", headers=auth_header(admin))
    r = client.put(f"/api/publications/{pub['id']}", json={"notes": "camera ready"}, headers=auth_header(faculty))
    assert r.status_code == 200
    assert r.json()["data"]["publication"]["status"] == "Approved"


def test_review_revalidates_stored_record(client, db, faculty, admin):
    pub = create(client, faculty)
    record = PublicationService().get(db, pub["id"])
    record.title = "x"
    db.commit()

    r = client.put(
        f"/api/publications/{pub['id']}/review",
        json={"status": "Published"},
        headers=auth_header(admin),
    )
    assert r.status_code == 400
    assert "title" in {e["field"] for e in r.json()["errors"]}
    assert PublicationService().get(db, pub["id"]).status == "Draft"


def test_created_record_reads_back_unchanged(client, faculty):
    body = publication_body(
        journalName="Field Crops Research",
        keywords=["yield", "cnn"],
        citationCount=4,
        quartile="Q1",
    )
    r = client.post("/api/publications", json=body, headers=auth_header(faculty))
    created = r.json()["data"]["publication"]
    fetched = client.get(f"/api/publications/{created['id']}").json()["data"]["publication"]

    assert fetched == created
    for key in ("title", "publicationType", "department", "journalName", "keywords", "citationCount", "quartile"):
        assert fetched[key] == body[key]
    assert fetched["authors"][0]["name"] == "Ali Khan"
