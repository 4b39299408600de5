from app.tests.helpers import auth_header, project_body, publication_body, travel_body


def seed(client, user):
    client.post("/api/publications", json=publication_body(), headers=auth_header(user))
    client.post("/api/projects", json=project_body(agency="HEC", budget=100000), headers=auth_header(user))
    client.post("/api/projects", json=project_body(agency="HEC", budget=300000), headers=auth_header(user))
    client.post("/api/travel", json=travel_body(amount=50000, agency="NSF"), headers=auth_header(user))


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["data"]["status"] == "ok"
    assert r.headers.get("X-Request-ID")


def test_funding_stats(client, faculty):
    seed(client, faculty)
    out = client.get("/api/funding/stats").json()["data"]
    assert out["overview"]["totalFunding"] == 450000
    assert out["projects"]["byAgency"] == {"HEC": 400000}
    assert out["combined"]["topAgencies"][0] == {"name": "HEC", "amount": 400000}


def test_funding_slices(client, faculty):
    seed(client, faculty)
    dept = client.get("/api/funding/department/Computer Science").json()["data"]
    assert dept["projectCount"] == 2
    assert dept["travelCount"] == 1
    assert client.get("/api/funding/agency/NSF").json()["data"]["totalFunding"] == 50000
    assert client.get("/api/funding/sources").json()["data"]["totalSources"] == 2
    assert client.get("/api/funding/opportunities").json()["data"]["totalOpportunities"] == 2


def test_comprehensive_stats(client, faculty):
    seed(client, faculty)
    summary = client.get("/api/reports/stats").json()["data"]["summary"]
    assert summary["totalPublications"] == 1
    assert summary["totalProjects"] == 2
    assert summary["totalFunding"] == 450000


def test_generate(client, faculty):
    seed(client, faculty)
    r = client.post("/api/reports/generate", json={"module": "projects", "dateRange": "all"})
    data = r.json()["data"]
    assert data["summary"]["totalRecords"] == 2
    assert data["reportData"]["projects"][0]["principalInvestigator"]["email"] == "khan@uni.edu"


def test_export_csv_download(client, faculty):
    seed(client, faculty)
    r = client.post("/api/reports/export", json={"module": "all", "format": "csv"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert 'filename="all-report-' in r.headers["content-disposition"]
    assert "=== PROJECTS ===" in r.text
    assert "=== USERS ===" in r.text


def test_export_json_download(client, faculty):
    seed(client, faculty)
    r = client.post("/api/reports/export", json={"module": "travel"})
    assert r.headers["content-type"].startswith("application/json")
    assert r.json()["summary"]["totalRecords"] == 1


def test_export_unknown_format(client):
    r = client.post("/api/reports/export", json={"format": "pdf"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "format"


def test_unknown_module_is_rejected(client):
    assert client.post("/api/reports/generate", json={"module": "grants"}).status_code == 400
