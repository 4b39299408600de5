from datetime import datetime, timezone

import pytest

from app.core.errors import ValidationError
from app.schemas.reports import DateRange, ExportRequest, ReportModule, ReportRequest
from app.services import report_service
from app.services.publication_service import PublicationService
from app.tests.helpers import principal_for, publication_body

NOW = datetime(2024, 8, 31, 12, 0, tzinfo=timezone.utc)


def test_months_ago_clamps_to_month_end():
    assert report_service.months_ago(NOW, 6) == datetime(2024, 2, 29, 12, 0, tzinfo=timezone.utc)
    assert report_service.months_ago(NOW, 3) == datetime(2024, 5, 31, 12, 0, tzinfo=timezone.utc)
    assert report_service.months_ago(NOW, 9).year == 2023


def test_year_windows_are_half_open():
    lower, upper, inclusive = report_service.date_window(DateRange.this_year, now=NOW)
    assert lower == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert upper == datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert inclusive is False

    lower, upper, _ = report_service.date_window(DateRange.last_year, now=NOW)
    assert (lower.year, upper.year) == (2023, 2024)


def test_custom_window_needs_both_bounds():
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert report_service.date_window(DateRange.custom, start, None, now=NOW) == (None, None, False)
    assert report_service.date_window(DateRange.custom, start, NOW, now=NOW) == (start, NOW, True)


def seed_publications(db, owner):
    svc = PublicationService()
    principal = principal_for(owner)
    svc.create(db, principal=principal, payload=publication_body(publicationDate="2022-06-01T00:00:00Z"))
    svc.create(db, principal=principal, payload=publication_body(title="Federated Learning at the Edge"))


def test_generate_filters_by_custom_range(db, faculty):
    seed_publications(db, faculty)
    req = ReportRequest(
        module=ReportModule.publications,
        date_range=DateRange.custom,
        start_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        end_date=datetime(2024, 12, 31, tzinfo=timezone.utc),
    )

    out = report_service.generate(db, req)

    assert out["summary"] == {"totalRecords": 1, "modules": ["publications"]}
    row = out["reportData"]["publications"][0]
    assert row["title"] == "Federated Learning at the Edge"
    assert row["submittedBy"] == {"firstName": "Ali", "lastName": "Khan", "email": "khan@uni.edu"}
    assert out["filters"]["dateRange"] == "custom"


def test_all_modules_include_users_unfiltered(db, faculty):
    out = report_service.generate(db, ReportRequest(date_range=DateRange.this_year))
    assert out["summary"]["modules"] == list(report_service.SOURCES)
    assert len(out["reportData"]["users"]) == 1


def test_export_rejects_unknown_format(db):
    with pytest.raises(ValidationError) as exc:
        report_service.export(db, ExportRequest(format="xml"))
    assert exc.value.errors == [{"field": "format", "message": "Invalid format. Supported formats: json, csv"}]


def test_csv_export_has_one_section_per_module(db, faculty):
    seed_publications(db, faculty)
    filename, media_type, body = report_service.export(
        db, ExportRequest(module=ReportModule.publications, format="CSV")
    )

    text = b"".join(body).decode("utf-8")
    lines = text.splitlines()
    assert filename.startswith("publications-report-") and filename.endswith(".csv")
    assert media_type == "text/csv"
    assert lines[0] == "=== PUBLICATIONS ==="
    assert {"id", "title", "status"} <= set(lines[1].split(","))
    assert "USERS" not in text


def test_comprehensive_stats_summary(db, faculty):
    seed_publications(db, faculty)
    out = report_service.comprehensive_stats(db)
    assert out["summary"]["totalPublications"] == 2
    assert out["summary"]["totalUsers"] == 1
    assert out["summary"]["totalFunding"] == 0
