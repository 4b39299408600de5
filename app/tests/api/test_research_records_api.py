from sqlalchemy.exc import SQLAlchemyError

from app.tests.helpers import (
    auth_header,
    event_body,
    fyp_body,
    project_body,
    thesis_body,
    travel_body,
)


def post(client, path, body, user):
    r = client.post(path, json=body, headers=auth_header(user))
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_thesis_edit_is_owner_only(client, faculty, other_faculty):
    thesis = post(client, "/api/thesis", thesis_body(), faculty)["thesisSupervision"]
    r = client.put(f"/api/thesis/{thesis['id']}", json={"notes": "x"}, headers=auth_header(other_faculty))
    assert r.status_code == 403
    assert r.json()["message"] == "Not authorized to update this thesis supervision"


def test_defense_pass_completes_thesis(client, faculty):
    thesis = post(client, "/api/thesis", thesis_body(status="Writing"), faculty)["thesisSupervision"]
    r = client.put(
        f"/api/thesis/{thesis['id']}/defense",
        json={"date": "2025-06-01T10:00:00Z", "time": "10:00", "venue": "Senate Hall", "result": "Pass"},
        headers=auth_header(faculty),
    )
    out = r.json()["data"]["thesisSupervision"]
    assert r.status_code == 200
    assert out["status"] == "Completed"
    assert out["defense"]["venue"] == "Senate Hall"
    assert out["completionPercentage"] == 100


def test_defense_with_revisions_keeps_status(client, faculty):
    thesis = post(client, "/api/thesis", thesis_body(status="Writing"), faculty)["thesisSupervision"]
    r = client.put(
        f"/api/thesis/{thesis['id']}/defense",
        json={"date": "2025-06-01T10:00:00Z", "time": "10:00", "venue": "Senate Hall",
              "result": "Pass with Minor Revisions"},
        headers=auth_header(faculty),
    )
    assert r.json()["data"]["thesisSupervision"]["status"] == "Writing"


def test_admin_approves_proposed_event(client, faculty, admin):
    event = post(client, "/api/events", event_body(status="Proposed"), faculty)["event"]
    r = client.put(f"/api/events/{event['id']}/approve", headers=auth_header(admin))
    out = r.json()["data"]["event"]
    assert r.status_code == 200
    assert r.json()["message"] == "Event approved successfully"
    assert out["status"] == "Approved"
    assert out["reviewedBy"]["id"] == admin.id
    assert out["approvedDate"] is not None


def test_event_registration_and_attendance(client, faculty, other_faculty):
    body = event_body(registration={"isRequired": True, "maxParticipants": 1})
    event = post(client, "/api/events", body, faculty)["event"]
    url = f"/api/events/{event['id']}"

    r = client.post(f"{url}/register", headers=auth_header(other_faculty))
    assert r.status_code == 201
    participant = r.json()["data"]["participant"]
    assert participant["email"] == "raza@uni.edu"
    assert participant["attendanceStatus"] == "Registered"

    assert client.post(f"{url}/register", headers=auth_header(faculty)).status_code == 400

    r = client.put(
        f"{url}/attendance",
        json={"participantId": participant["id"], "attendanceStatus": "Attended"},
        headers=auth_header(faculty),
    )
    assert r.json()["data"]["participant"]["attendanceStatus"] == "Attended"

    r = client.put(
        f"{url}/attendance",
        json={"participantId": "nobody", "attendanceStatus": "Absent"},
        headers=auth_header(faculty),
    )
    assert r.status_code == 404


def test_registration_closed_when_not_required(client, faculty):
    event = post(client, "/api/events", event_body(), faculty)["event"]
    r = client.post(f"/api/events/{event['id']}/register", json={}, headers=auth_header(faculty))
    assert r.status_code == 400


def test_fyp_grade_sums_marks(client, faculty):
    fyp = post(client, "/api/fyp", fyp_body(), faculty)["fypProject"]
    r = client.put(
        f"/api/fyp/{fyp['id']}/grade",
        json={"supervisorMarks": 40, "externalMarks": 30, "grade": "A"},
        headers=auth_header(faculty),
    )
    out = r.json()["data"]["fypProject"]
    assert out["status"] == "Graded"
    assert out["evaluation"]["totalMarks"] == 70
    assert out["evaluation"]["grade"] == "A"


def test_fyp_filters_on_student_batch(client, faculty):
    post(client, "/api/fyp", fyp_body(), faculty)
    assert client.get("/api/fyp?batch=2020").json()["data"]["pagination"]["total"] == 1
    assert client.get("/api/fyp?batch=2019").json()["data"]["pagination"]["total"] == 0


def test_travel_budget_and_post_travel(client, faculty):
    body = travel_body(budgetBreakdown={"airfare": {"amount": 1200}, "meals": {"amount": 300}})
    grant = post(client, "/api/travel", body, faculty)["travelGrant"]
    assert grant["totalBudget"] == 1500
    assert grant["status"] == "Draft"

    r = client.put(
        f"/api/travel/{grant['id']}/post-travel",
        json={"outcomes": ["Presented paper"], "feedback": {"rating": 5}},
        headers=auth_header(faculty),
    )
    out = r.json()["data"]["travelGrant"]
    assert out["status"] == "Completed"
    assert out["postTravel"]["reportSubmitted"] is True
    assert out["postTravel"]["outcomes"] == ["Presented paper"]


def test_project_list_filters_by_agency(client, faculty):
    post(client, "/api/projects", project_body(agency="HEC"), faculty)
    post(client, "/api/projects", project_body(agency="NSF"), faculty)
    r = client.get("/api/projects?fundingAgency=NSF")
    projects = r.json()["data"]["projects"]
    assert len(projects) == 1
    assert projects[0]["fundingAgency"]["name"] == "NSF"


def test_thesis_under_review_can_be_approved_or_rejected(client, faculty, admin):
    approved = post(client, "/api/thesis", thesis_body(status="Under Review"), faculty)["thesisSupervision"]
    r = client.put(f"/api/thesis/{approved['id']}/approve", headers=auth_header(admin))
    assert r.status_code == 200
    assert r.json()["data"]["thesisSupervision"]["status"] == "Approved"

    rejected = post(client, "/api/thesis", thesis_body(status="Submitted"), faculty)["thesisSupervision"]
    r = client.put(f"/api/thesis/{rejected['id']}/reject", json={"comments": "Scope too wide"}, headers=auth_header(admin))
    assert r.status_code == 200
    out = r.json()["data"]["thesisSupervision"]
    assert out["status"] == "Rejected"
    assert out["rejectedDate"] is not None


def test_scheduled_event_is_still_awaiting_decision(client, faculty, admin):
    event = post(client, "/api/events", event_body(status="Scheduled"), faculty)["event"]
    r = client.put(f"/api/events/{event['id']}/approve", headers=auth_header(admin))
    assert r.status_code == 200
    assert r.json()["data"]["event"]["status"] == "Approved"


def test_owner_cannot_complete_project_without_review(client, faculty):
    r = client.post("/api/projects", json=project_body(status="Active"), headers=auth_header(faculty))
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "status"


def test_deleted_organizer_reads_as_null(client, db, faculty):
    event = post(client, "/api/events", event_body(), faculty)["event"]
    db.delete(faculty)
    db.commit()

    r = client.get(f"/api/events/{event['id']}")
    out = r.json()["data"]["event"]
    assert r.status_code == 200
    assert out["organizer"] is None
    assert out["organizerName"] == ""


def test_owner_filters_match_every_role(client, faculty, other_faculty):
    post(client, "/api/events", event_body(coOrganizers=[{"faculty": other_faculty.id}]), faculty)
    post(client, "/api/thesis", thesis_body(supervisoryCommittee=[{"member": other_faculty.id}]), faculty)
    post(client, "/api/projects", project_body(coPrincipalInvestigators=[{"faculty": other_faculty.id}]), faculty)

    for path, param in (("/api/events", "organizerId"), ("/api/thesis", "supervisorId"), ("/api/projects", "piId")):
        assert client.get(f"{path}?{param}={other_faculty.id}").json()["data"]["pagination"]["total"] == 1
        assert client.get(f"{path}?{param}={faculty.id}").json()["data"]["pagination"]["total"] == 1
        assert client.get(f"{path}?{param}=nobody").json()["data"]["pagination"]["total"] == 0


def test_store_failure_is_a_server_error(client, db, faculty, monkeypatch):
    def broken_commit():
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(db, "commit", broken_commit)
    r = client.post("/api/events", json=event_body(), headers=auth_header(faculty))
    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Server error"}
