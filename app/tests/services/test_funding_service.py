from app.services import funding_service
from app.services.funded_project_service import FundedProjectService
from app.services.travel_service import TravelService
from app.tests.helpers import principal_for, project_body, travel_body


def add_project(db, owner, **kwargs):
    return FundedProjectService().create(db, principal=principal_for(owner), payload=project_body(**kwargs))


def test_yearly_growth_edges():
    assert funding_service.yearly_growth([]) == 0
    assert funding_service.yearly_growth([(2024, 500.0)]) == 0
    assert funding_service.yearly_growth([(2023, 0.0), (2024, 100.0)]) == 100
    assert funding_service.yearly_growth([(2023, 200.0), (2024, 300.0)]) == 50


def test_classify_source_first_match_wins():
    assert funding_service.classify_source("National Science Foundation") == ("International", "USA")
    assert funding_service.classify_source("European Research Council") == ("International", "Europe")
    assert funding_service.classify_source("Gates Foundation") == ("Private", "Global")
    assert funding_service.classify_source("Google Research") == ("Corporate", "Global")
    assert funding_service.classify_source("HEC") == ("Government", "Pakistan")


def test_stats_with_no_records(db):
    out = funding_service.stats(db)
    assert out["overview"]["totalFunding"] == 0
    assert out["overview"]["averageFunding"] == 0
    assert out["projects"]["maxAmount"] == 0
    assert out["trends"]["yearlyGrowth"] == 0
    assert out["combined"]["topAgencies"] == []


def test_project_rollup_by_agency(db, faculty):
    add_project(db, faculty, agency="HEC", budget=100000)
    add_project(db, faculty, agency="HEC", budget=300000)

    out = funding_service.stats(db)

    assert out["projects"]["byAgency"] == {"HEC": 400000}
    assert out["projects"]["averageAmount"] == 200000
    assert out["projects"]["maxAmount"] == 300000
    assert out["projects"]["minAmount"] == 100000
    assert out["overview"]["totalFundingSources"] == 1


def test_growth_from_a_zero_year(db, faculty):
    add_project(db, faculty, budget=0, startDate="2023-01-10T00:00:00Z")
    add_project(db, faculty, budget=5000, startDate="2024-01-10T00:00:00Z")

    out = funding_service.stats(db)

    assert out["combined"]["byYear"] == {"2023": 0, "2024": 5000}
    assert out["trends"]["yearlyGrowth"] == 100


def test_department_and_agency_slices(db, faculty, other_faculty):
    add_project(db, faculty, agency="HEC", budget=1000)
    add_project(db, other_faculty, agency="NSF", budget=3000, department="Electrical Engineering")
    TravelService().create(db, principal=principal_for(faculty), payload=travel_body(amount=500, agency="HEC"))

    cs = funding_service.by_department(db, "Computer Science")
    assert cs["totalFunding"] == 1500
    assert cs["projectCount"] == 1
    assert cs["travelCount"] == 1

    nsf = funding_service.by_agency(db, "NSF")
    assert nsf["totalFunding"] == 3000
    assert nsf["averageFunding"] == 3000


def test_sources_and_opportunities(db, faculty):
    add_project(db, faculty, agency="NSF", budget=2000)
    add_project(db, faculty, agency="NSF", budget=4000)
    TravelService().create(db, principal=principal_for(faculty), payload=travel_body(amount=900, agency="HEC"))

    src = funding_service.sources(db)
    assert src["totalSources"] == 2
    nsf = next(s for s in src["sources"] if s["name"] == "NSF")
    assert nsf["type"] == "International"
    assert nsf["totalProjects"] == 2
    assert nsf["averageAmount"] == 3000
    assert src["byCountry"] == {"USA": 1, "Pakistan": 1}

    opp = funding_service.opportunities(db)
    assert opp["totalOpportunities"] == 2
    first = opp["opportunities"][0]
    assert first["id"] == 1
    assert first["agency"] == "NSF"
    assert first["maxAmount"] == 4000
    assert first["status"] == "Open"
