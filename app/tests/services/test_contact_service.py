import pytest

from app.core.errors import NotFound, ValidationError
from app.schemas.contacts import BulkUpdateRequest, RespondRequest
from app.services.contact_service import ContactService
from app.services.query import Pagination
from app.tests.helpers import contact_body, principal_for

svc = ContactService()


def submit(db, **overrides):
    return svc.create(db, payload=contact_body(**overrides), ip_address="10.0.0.1", user_agent="pytest")


def test_new_contact_starts_new_with_request_metadata(db):
    contact = submit(db, phone="0300 1234567")
    assert contact.status == "new"
    assert contact.ip_address == "10.0.0.1"
    assert contact.priority == "medium"
    assert contact.phone == "+03001234567"


def test_bulk_update_counts_only_existing_ids(db):
    a, b = submit(db), submit(db, email="b@example.com")
    body = BulkUpdateRequest(
        contact_ids=[a.id, b.id, "00000000-0000-0000-0000-000000000000"],
        updates={"status": "in-progress", "ipAddress": "1.2.3.4"},
    )

    counts = svc.bulk_update(db, body=body)

    assert counts == {"matchedCount": 2, "modifiedCount": 2}
    db.expire_all()
    assert svc.get(db, a.id).status == "in-progress"
    assert svc.get(db, a.id).ip_address == "10.0.0.1"


def test_bulk_update_without_usable_fields(db):
    a = submit(db)
    with pytest.raises(ValidationError):
        svc.bulk_update(db, body=BulkUpdateRequest(contact_ids=[a.id], updates={"id": "x"}))


def test_respond_defaults_to_responded(db, admin):
    contact = submit(db)
    out = svc.respond(
        db, contact_id=contact.id, principal=principal_for(admin), body=RespondRequest(message="Thanks!")
    )
    assert out.status == "responded"
    assert out.response["respondedBy"] == admin.id


def test_search_and_filters(db):
    submit(db, organization="NUST", priority="urgent")
    submit(db, email="other@example.com", subject="Admission query", contactType="admission")

    assert svc.list(db, pagination=Pagination(1, 10), search="nust").total == 1
    assert svc.list(db, pagination=Pagination(1, 10), filters={"contact_type": "admission"}).total == 1
    assert svc.list(db, pagination=Pagination(1, 10), search="nothing-like-this").items == []


def test_stats_overview(db):
    submit(db, priority="urgent")
    submit(db, priority="high", contactType="research")
    submit(db, contactType="research")

    out = svc.stats(db)

    assert out["overview"]["totalContacts"] == 3
    assert out["overview"]["newContacts"] == 3
    assert out["overview"]["urgentContacts"] == 1
    assert out["overview"]["highPriorityContacts"] == 1
    assert out["byType"][0] == {"type": "research", "count": 2}
    assert sum(m["count"] for m in out["monthly"]) == 3


def test_missing_contact(db):
    with pytest.raises(NotFound):
        svc.get(db, "missing")
