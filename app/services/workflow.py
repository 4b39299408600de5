# app/services/workflow.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Type

from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.models.enums import (
    EventStatus,
    FypStatus,
    ProjectStatus,
    PublicationStatus,
    ThesisStatus,
    TravelStatus,
)
from app.models.mixins import utcnow
from app.policies.rbac import Principal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusFlow:
    """
    Closed status vocabulary for one record type plus its approve/reject
    transition table.

    approve/reject are legal from every status outside the approved and
    rejected families; once a record sits in either family only ordinary
    updates and the type's auxiliary actions (grade, defense, post-travel)
    move it.
    """

    kind: str
    enum: Type[Enum]
    initial: Enum
    approved: Enum
    rejected: Enum
    approved_family: FrozenSet[Enum]
    rejected_family: FrozenSet[Enum]
    transitions: Dict[Enum, FrozenSet[Enum]] = field(init=False)

    def __post_init__(self) -> None:
        terminal = self.approved_family | self.rejected_family
        table = {
            s: (frozenset() if s in terminal else frozenset({self.approved, self.rejected}))
            for s in self.enum
        }
        object.__setattr__(self, "transitions", table)

    @property
    def terminal(self) -> FrozenSet[Enum]:
        return self.approved_family | self.rejected_family

    def parse(self, value: str) -> Enum:
        try:
            return self.enum(value)
        except ValueError:
            raise ValidationError.single("status", f"Invalid {self.kind} status '{value}'")

    def assert_transition(self, current: str, target: Enum) -> None:
        if target not in self.transitions[self.parse(current)]:
            raise ValidationError.single(
                "status",
                f"Cannot change {self.kind} status from '{current}' to '{target.value}'",
            )


# ─────────────────────────────────────────────
# FLOW TABLE (one per record type)
# ─────────────────────────────────────────────

PUBLICATION_FLOW = StatusFlow(
    kind="publication",
    enum=PublicationStatus,
    initial=PublicationStatus.DRAFT,
    approved=PublicationStatus.APPROVED,
    rejected=PublicationStatus.REJECTED,
    approved_family=frozenset({PublicationStatus.APPROVED, PublicationStatus.PUBLISHED}),
    rejected_family=frozenset({PublicationStatus.REJECTED}),
)

PROJECT_FLOW = StatusFlow(
    kind="project",
    enum=ProjectStatus,
    initial=ProjectStatus.PROPOSED,
    approved=ProjectStatus.APPROVED,
    rejected=ProjectStatus.REJECTED,
    approved_family=frozenset(
        {ProjectStatus.APPROVED, ProjectStatus.ACTIVE, ProjectStatus.COMPLETED}
    ),
    rejected_family=frozenset({ProjectStatus.REJECTED, ProjectStatus.TERMINATED}),
)

FYP_FLOW = StatusFlow(
    kind="FYP project",
    enum=FypStatus,
    initial=FypStatus.PROPOSED,
    approved=FypStatus.APPROVED,
    rejected=FypStatus.REJECTED,
    approved_family=frozenset(
        {
            FypStatus.APPROVED,
            FypStatus.COMPLETED,
            FypStatus.DEFENDED,
            FypStatus.GRADED,
        }
    ),
    rejected_family=frozenset({FypStatus.REJECTED}),
)

THESIS_FLOW = StatusFlow(
    kind="thesis",
    enum=ThesisStatus,
    initial=ThesisStatus.PROPOSED,
    approved=ThesisStatus.APPROVED,
    rejected=ThesisStatus.REJECTED,
    approved_family=frozenset(
        {
            ThesisStatus.APPROVED,
            ThesisStatus.DEFENDED,
            ThesisStatus.COMPLETED,
            ThesisStatus.GRADUATED,
        }
    ),
    rejected_family=frozenset({ThesisStatus.REJECTED, ThesisStatus.WITHDRAWN}),
)

EVENT_FLOW = StatusFlow(
    kind="event",
    enum=EventStatus,
    initial=EventStatus.PLANNED,
    approved=EventStatus.APPROVED,
    rejected=EventStatus.REJECTED,
    approved_family=frozenset({EventStatus.APPROVED, EventStatus.COMPLETED}),
    rejected_family=frozenset({EventStatus.REJECTED, EventStatus.CANCELLED}),
)

TRAVEL_FLOW = StatusFlow(
    kind="travel grant",
    enum=TravelStatus,
    initial=TravelStatus.DRAFT,
    approved=TravelStatus.APPROVED,
    rejected=TravelStatus.REJECTED,
    approved_family=frozenset({TravelStatus.APPROVED, TravelStatus.COMPLETED}),
    rejected_family=frozenset({TravelStatus.REJECTED, TravelStatus.CANCELLED}),
)


# ─────────────────────────────────────────────
# TRANSITIONS
# ─────────────────────────────────────────────


def decide(
    db: Session,
    record,
    flow: StatusFlow,
    *,
    approve: bool,
    reviewer: Principal,
    comments: Optional[str] = None,
):
    """
    Approve or reject ``record``: status, reviewer and the matching decision
    timestamp are written together in one commit.
    """
    target = flow.approved if approve else flow.rejected
    flow.assert_transition(record.status, target)

    now = utcnow()
    record.status = target.value
    record.reviewed_by = reviewer.user_id
    record.review_comments = comments
    if approve:
        record.approved_date = now
    else:
        record.rejected_date = now

    db.commit()
    db.refresh(record)

    logger.info(
        "%s %s",
        flow.kind,
        "approved" if approve else "rejected",
        extra={"record_id": record.id, "reviewer_id": reviewer.user_id, "status": record.status},
    )
    return record


def stamp_review(
    db: Session,
    record,
    flow: StatusFlow,
    *,
    status: Enum,
    reviewer: Principal,
    comments: Optional[str] = None,
):
    """
    Generic moderation: any value of the type's vocabulary is accepted as the
    target. Type-specific side effects are applied by the caller before commit.
    """
    flow.parse(status.value)

    record.status = status.value
    record.reviewed_by = reviewer.user_id
    record.review_comments = comments
    record.review_date = utcnow()

    logger.info(
        "%s reviewed",
        flow.kind,
        extra={"record_id": record.id, "reviewer_id": reviewer.user_id, "status": status.value},
    )
    return record
