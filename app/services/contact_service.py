# app/services/contact_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import case, extract, func, select, update
from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationError
from app.models.contact import Contact
from app.models.enums import ContactStatus
from app.models.mixins import utcnow
from app.policies.rbac import Principal
from app.schemas.contacts import BulkUpdateRequest, BulkUpdates, ContactCreate, ContactUpdate, RespondRequest
from app.services.query import Page, Pagination, order_clause, paginate, text_search
from app.services.records import assign, schema_keys, to_column, validate

logger = logging.getLogger(__name__)

# never writable through a bulk update
BULK_PROTECTED = ("id", "createdAt", "ipAddress", "userAgent")


class ContactService:
    """
    Public inquiries: anonymous create, admin-only triage.
    Callers enforce the admin check; this layer only owns data rules.
    """

    sortable = ("created_at", "updated_at", "status", "priority", "contact_type", "email", "last_name")

    def get(self, db: Session, contact_id: str) -> Contact:
        contact = db.get(Contact, str(contact_id))
        if contact is None:
            raise NotFound("Contact not found")
        return contact

    def list(
        self,
        db: Session,
        *,
        pagination: Pagination,
        search: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> Page:
        filters = {k: v for k, v in (filters or {}).items() if v not in (None, "")}
        stmt = select(Contact)
        for key in ("status", "contact_type", "priority", "source", "assigned_to"):
            if filters.get(key):
                stmt = stmt.where(getattr(Contact, key) == filters[key])
        matched = text_search(
            (Contact.first_name, Contact.last_name, Contact.email, Contact.subject, Contact.organization),
            search,
        )
        if matched is not None:
            stmt = stmt.where(matched)
        stmt = stmt.order_by(
            *order_clause(
                Contact,
                sort_by,
                sort_order,
                allowed=self.sortable,
                default=(Contact.created_at.desc(),),
            )
        )
        return paginate(db, stmt, pagination)

    def create(
        self,
        db: Session,
        *,
        payload: Any,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Contact:
        data = validate(ContactCreate, payload)
        contact = Contact(status=ContactStatus.NEW.value, ip_address=ip_address, user_agent=user_agent)
        assign(contact, data)
        db.add(contact)
        db.commit()
        db.refresh(contact)
        logger.info(
            "contact submitted",
            extra={"record_id": contact.id, "contact_type": contact.contact_type},
        )
        return contact

    def update(self, db: Session, *, contact_id: str, patch: Any) -> Contact:
        contact = self.get(db, contact_id)
        keys = schema_keys(ContactUpdate)
        merged = {k: v for k, v in contact.to_dict().items() if k in keys}
        if isinstance(patch, dict):
            merged.update(patch)
        assign(contact, validate(ContactUpdate, merged))
        db.commit()
        db.refresh(contact)
        return contact

    def delete(self, db: Session, *, contact_id: str) -> None:
        contact = self.get(db, contact_id)
        db.delete(contact)
        db.commit()
        logger.info("contact deleted", extra={"record_id": contact_id})

    # ─────────────────────────────────────────────
    # TRIAGE
    # ─────────────────────────────────────────────

    def respond(
        self, db: Session, *, contact_id: str, principal: Principal, body: RespondRequest
    ) -> Contact:
        contact = self.get(db, contact_id)
        contact.response = {
            "message": body.message,
            "respondedBy": principal.user_id,
            "respondedAt": utcnow().isoformat(),
        }
        contact.status = (body.status or ContactStatus.RESPONDED).value
        db.commit()
        db.refresh(contact)
        logger.info(
            "contact responded",
            extra={"record_id": contact.id, "actor_id": principal.user_id, "status": contact.status},
        )
        return contact

    def set_status(self, db: Session, *, contact_id: str, status: ContactStatus) -> Contact:
        contact = self.get(db, contact_id)
        contact.status = status.value
        db.commit()
        db.refresh(contact)
        logger.info("contact status changed", extra={"record_id": contact.id, "status": status.value})
        return contact

    def bulk_update(self, db: Session, *, body: BulkUpdateRequest) -> Dict[str, int]:
        """
        One multi-row UPDATE; ids that do not exist are simply not matched.
        Rows already holding the requested values still count as modified.
        """
        updates = {k: v for k, v in body.updates.items() if k not in BULK_PROTECTED}
        data = validate(BulkUpdates, updates)
        values = {
            name: to_column(getattr(data, name))
            for name in data.model_fields_set
        }
        if not values:
            raise ValidationError.single("updates", "No updatable fields supplied")
        values["updated_at"] = utcnow()

        ids = list(dict.fromkeys(str(i) for i in body.contact_ids))
        result = db.execute(
            update(Contact)
            .where(Contact.id.in_(ids))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        db.commit()

        matched = result.rowcount
        logger.info(
            "contacts bulk updated",
            extra={"requested": len(ids), "matched": matched, "fields": sorted(values)},
        )
        return {"matchedCount": matched, "modifiedCount": matched}

    # ─────────────────────────────────────────────
    # STATS
    # ─────────────────────────────────────────────

    def stats(self, db: Session) -> Dict[str, Any]:
        def tally(column, value):
            return func.coalesce(func.sum(case((column == value, 1), else_=0)), 0)

        row = db.execute(
            select(
                func.count(),
                tally(Contact.status, "new"),
                tally(Contact.status, "in-progress"),
                tally(Contact.status, "responded"),
                tally(Contact.status, "resolved"),
                tally(Contact.status, "closed"),
                tally(Contact.priority, "urgent"),
                tally(Contact.priority, "high"),
            ).select_from(Contact)
        ).one()

        by_type = db.execute(
            select(Contact.contact_type, func.count().label("n"))
            .group_by(Contact.contact_type)
            .order_by(func.count().desc())
        ).all()

        year = extract("year", Contact.created_at)
        month = extract("month", Contact.created_at)
        monthly = db.execute(
            select(year, month, func.count())
            .group_by(year, month)
            .order_by(year.desc(), month.desc())
            .limit(12)
        ).all()

        return {
            "overview": {
                "totalContacts": row[0],
                "newContacts": row[1],
                "inProgressContacts": row[2],
                "respondedContacts": row[3],
                "resolvedContacts": row[4],
                "closedContacts": row[5],
                "urgentContacts": row[6],
                "highPriorityContacts": row[7],
            },
            "byType": [{"type": t, "count": n} for t, n in by_type],
            "monthly": [{"year": int(y), "month": int(m), "count": n} for y, m, n in monthly],
        }
