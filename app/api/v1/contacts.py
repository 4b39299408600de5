# app/api/v1/contacts.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from sqlalchemy.orm import Session

from app.api.v1.records import list_params
from app.core.auth_deps import get_current_principal
from app.core.errors import ok
from app.db.session import get_db
from app.models.enums import ContactStatus
from app.policies.rbac import Principal, require_admin
from app.schemas.contacts import BulkUpdateRequest, RespondRequest
from app.services.contact_service import ContactService
from app.services.presenters import present, present_many
from app.services.query import Pagination

router = APIRouter(prefix="/contacts")
service = ContactService()


def contact_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    require_admin(principal)
    return principal


@router.post("", status_code=201)
def create_contact(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    contact = service.create(
        db,
        payload=payload,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    return ok(
        {"contact": {"id": contact.id, "status": contact.status, "createdAt": contact.to_dict()["createdAt"]}},
        message="Thank you for contacting us. We will get back to you soon.",
    )


@router.get("")
def list_contacts(
    pagination: Pagination = Depends(list_params),
    status: Optional[str] = Query(None),
    contact_type: Optional[str] = Query(None, alias="contactType"),
    priority: Optional[str] = Query(None),
    source: Optional[str] = Query(None),
    assigned_to: Optional[str] = Query(None, alias="assignedTo"),
    search: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    db: Session = Depends(get_db),
    principal: Principal = Depends(contact_admin),
):
    page = service.list(
        db,
        pagination=pagination,
        search=search,
        filters={
            "status": status,
            "contact_type": contact_type,
            "priority": priority,
            "source": source,
            "assigned_to": assigned_to,
        },
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return ok({"contacts": present_many(db, page.items), "pagination": page.meta()})


@router.get("/stats")
def contact_stats(db: Session = Depends(get_db), principal: Principal = Depends(contact_admin)):
    return ok(service.stats(db))


@router.api_route("/bulk/update", methods=["POST", "PUT"])
def bulk_update_contacts(
    body: BulkUpdateRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(contact_admin),
):
    counts = service.bulk_update(db, body=body)
    return ok(counts, message=f"{counts['modifiedCount']} contacts updated successfully")


@router.get("/{contact_id}")
def get_contact(contact_id: str, db: Session = Depends(get_db), principal: Principal = Depends(contact_admin)):
    return ok({"contact": present(db, service.get(db, contact_id))})


@router.put("/{contact_id}")
def update_contact(
    contact_id: str,
    patch: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    principal: Principal = Depends(contact_admin),
):
    contact = service.update(db, contact_id=contact_id, patch=patch)
    return ok({"contact": present(db, contact)}, message="Contact updated successfully")


@router.delete("/{contact_id}")
def delete_contact(contact_id: str, db: Session = Depends(get_db), principal: Principal = Depends(contact_admin)):
    service.delete(db, contact_id=contact_id)
    return ok(message="Contact deleted successfully")


@router.put("/{contact_id}/respond")
def respond_to_contact(
    contact_id: str,
    body: RespondRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(contact_admin),
):
    contact = service.respond(db, contact_id=contact_id, principal=principal, body=body)
    return ok({"contact": present(db, contact)}, message="Response sent successfully")


@router.put("/{contact_id}/resolve")
def resolve_contact(contact_id: str, db: Session = Depends(get_db), principal: Principal = Depends(contact_admin)):
    contact = service.set_status(db, contact_id=contact_id, status=ContactStatus.RESOLVED)
    return ok({"contact": present(db, contact)}, message="Contact marked as resolved")


@router.put("/{contact_id}/close")
def close_contact(contact_id: str, db: Session = Depends(get_db), principal: Principal = Depends(contact_admin)):
    contact = service.set_status(db, contact_id=contact_id, status=ContactStatus.CLOSED)
    return ok({"contact": present(db, contact)}, message="Contact closed successfully")
