import pytest

from app.core.errors import ValidationError
from app.models.enums import EventStatus, ThesisStatus
from app.services import workflow
from app.services.event_service import EventService
from app.tests.helpers import event_body, principal_for


def test_terminal_statuses_have_no_decisions():
    flow = workflow.EVENT_FLOW
    assert flow.transitions[EventStatus.COMPLETED] == frozenset()
    assert flow.transitions[EventStatus.CANCELLED] == frozenset()
    assert flow.transitions[EventStatus.PROPOSED] == {EventStatus.APPROVED, EventStatus.REJECTED}
    assert flow.transitions[EventStatus.SCHEDULED] == {EventStatus.APPROVED, EventStatus.REJECTED}


def test_thesis_withdrawn_is_in_rejected_family():
    assert ThesisStatus.WITHDRAWN in workflow.THESIS_FLOW.terminal
    assert ThesisStatus.PROPOSED not in workflow.THESIS_FLOW.terminal
    assert ThesisStatus.UNDER_REVIEW not in workflow.THESIS_FLOW.terminal
    assert ThesisStatus.SUBMITTED not in workflow.THESIS_FLOW.terminal


def test_unknown_stored_status_is_a_validation_error():
    with pytest.raises(ValidationError):
        workflow.EVENT_FLOW.parse("Archived")


def test_approve_stamps_reviewer_and_date(db, admin, faculty):
    svc = EventService()
    event = svc.create(db, principal=principal_for(faculty), payload=event_body(status="Proposed"))

    approved = svc.approve(db, record_id=event.id, principal=principal_for(admin), comments="looks good")

    assert approved.status == "Approved"
    assert approved.reviewed_by == admin.id
    assert approved.review_comments == "looks good"
    assert approved.approved_date is not None
    assert approved.rejected_date is None


def test_decision_from_terminal_status_is_rejected(db, admin, faculty):
    svc = EventService()
    event = svc.create(db, principal=principal_for(admin), payload=event_body(status="Completed"))

    with pytest.raises(ValidationError) as exc:
        svc.reject(db, record_id=event.id, principal=principal_for(admin))
    assert exc.value.errors[0]["field"] == "status"


def test_owner_status_is_kept_out_of_review_families(db, faculty):
    svc = EventService()
    owner = principal_for(faculty)
    with pytest.raises(ValidationError):
        svc.create(db, principal=owner, payload=event_body(status="Approved"))

    event = svc.create(db, principal=owner, payload=event_body(status="Scheduled"))
    with pytest.raises(ValidationError) as exc:
        svc.update(db, record_id=event.id, principal=owner, patch={"status": "Cancelled"})
    assert exc.value.errors[0]["field"] == "status"

    moved = svc.update(db, record_id=event.id, principal=owner, patch={"status": "Ongoing"})
    assert moved.status == "Ongoing"
