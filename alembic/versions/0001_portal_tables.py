"""portal tables

Revision ID: 0001_portal_tables
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_portal_tables"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record():
    return [
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _review():
    return [
        sa.Column("reviewed_by", sa.String(length=36), nullable=True),
        sa.Column("review_comments", sa.Text(), nullable=True),
        sa.Column("review_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("approved_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rejected_date", sa.DateTime(timezone=True), nullable=True),
    ]


def _json(name, nullable=False):
    return sa.Column(name, sa.JSON(), nullable=nullable)


def _when(name, nullable=True):
    return sa.Column(name, sa.DateTime(timezone=True), nullable=nullable)


def _url(name):
    return sa.Column(name, sa.String(length=512), nullable=True)


def upgrade():
    op.create_table(
        "users",
        *_record(),
        sa.Column("email", sa.String(length=254), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=256), nullable=False),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("department", sa.String(length=64), nullable=True),
        sa.Column("designation", sa.String(length=64), nullable=True),
        sa.Column("employee_id", sa.String(length=32), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("orcid_id", sa.String(length=19), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        _json("research_interests"),
    )
    op.create_index("ix_users_role", "users", ["role"])
    op.create_index("ix_users_department", "users", ["department"])

    op.create_table(
        "publications",
        *_record(),
        *_review(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("abstract", sa.Text(), nullable=True),
        sa.Column("publication_type", sa.String(length=32), nullable=False),
        sa.Column("doi", sa.String(length=128), nullable=True, unique=True),
        sa.Column("isbn", sa.String(length=32), nullable=True),
        sa.Column("issn", sa.String(length=32), nullable=True),
        sa.Column("journal_name", sa.String(length=256), nullable=True),
        sa.Column("conference_name", sa.String(length=256), nullable=True),
        sa.Column("publisher", sa.String(length=256), nullable=True),
        sa.Column("volume", sa.String(length=32), nullable=True),
        sa.Column("issue", sa.String(length=32), nullable=True),
        sa.Column("pages", sa.String(length=32), nullable=True),
        _when("publication_date", nullable=False),
        _when("acceptance_date"),
        _when("submission_date"),
        _json("authors"),
        _json("external_authors"),
        sa.Column("department", sa.String(length=64), nullable=False),
        sa.Column("citation_count", sa.Integer(), nullable=False),
        sa.Column("impact_factor", sa.Float(), nullable=True),
        sa.Column("h_index", sa.Integer(), nullable=True),
        sa.Column("quartile", sa.String(length=2), nullable=True),
        _json("keywords"),
        _json("categories"),
        _url("url"),
        _url("pdf_url"),
        _json("funding_agencies"),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("submitted_by", sa.String(length=36), nullable=False),
        sa.Column("is_public", sa.Boolean(), nullable=False),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        sa.Column("language", sa.String(length=32), nullable=False),
        sa.Column("country", sa.String(length=64), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_publications_status", "publications", ["status"])
    op.create_index("ix_publications_submitted_by", "publications", ["submitted_by"])
    op.create_index("ix_publications_date", "publications", ["publication_date"])

    op.create_table(
        "funded_projects",
        *_record(),
        *_review(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("abstract", sa.Text(), nullable=True),
        sa.Column("project_type", sa.String(length=32), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=True),
        _json("funding_agency"),
        sa.Column("total_budget", sa.Float(), nullable=False),
        sa.Column("currency", sa.String(length=8), nullable=False),
        sa.Column("university_share", sa.Float(), nullable=False),
        sa.Column("faculty_share", sa.Float(), nullable=False),
        sa.Column("principal_investigator", sa.String(length=36), nullable=False),
        _json("co_principal_investigators"),
        _json("team_members"),
        _json("external_collaborators"),
        sa.Column("department", sa.String(length=64), nullable=False),
        _when("start_date", nullable=False),
        _when("end_date", nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        _when("submitted_date"),
        _json("deliverables"),
        _json("milestones"),
        _json("keywords"),
        _json("research_areas"),
        _json("expected_outcomes"),
        _json("actual_outcomes"),
        _url("project_website"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_funded_projects_status", "funded_projects", ["status"])
    op.create_index("ix_funded_projects_pi", "funded_projects", ["principal_investigator"])
    op.create_index("ix_funded_projects_start", "funded_projects", ["start_date"])

    op.create_table(
        "final_year_projects",
        *_record(),
        *_review(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("abstract", sa.Text(), nullable=True),
        sa.Column("project_type", sa.String(length=32), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=True),
        _json("student"),
        sa.Column("supervisor", sa.String(length=36), nullable=False),
        sa.Column("co_supervisor", sa.String(length=36), nullable=True),
        _json("external_supervisor", nullable=True),
        _when("start_date", nullable=False),
        _when("end_date", nullable=False),
        _when("submission_date"),
        _when("defense_date"),
        sa.Column("status", sa.String(length=32), nullable=False),
        _json("funding", nullable=True),
        _json("objectives"),
        sa.Column("methodology", sa.Text(), nullable=True),
        _json("deliverables"),
        _json("evaluation", nullable=True),
        _json("technologies"),
        _json("keywords"),
        _json("research_areas"),
        _url("project_repository"),
        _url("demo_url"),
        _json("outcomes"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_fyp_status", "final_year_projects", ["status"])
    op.create_index("ix_fyp_supervisor", "final_year_projects", ["supervisor"])
    op.create_index("ix_fyp_start", "final_year_projects", ["start_date"])

    op.create_table(
        "thesis_supervisions",
        *_record(),
        *_review(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("abstract", sa.Text(), nullable=True),
        sa.Column("thesis_type", sa.String(length=16), nullable=False),
        sa.Column("degree", sa.String(length=16), nullable=False),
        _json("student"),
        sa.Column("supervisor", sa.String(length=36), nullable=False),
        sa.Column("co_supervisor", sa.String(length=36), nullable=True),
        _json("external_supervisor", nullable=True),
        _json("supervisory_committee"),
        _when("start_date", nullable=False),
        _when("expected_completion_date", nullable=False),
        _when("actual_completion_date"),
        _when("submission_date"),
        _when("defense_date"),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("research_area", sa.String(length=100), nullable=False),
        sa.Column("research_methodology", sa.Text(), nullable=True),
        _json("objectives"),
        _json("research_questions"),
        _json("milestones"),
        _json("defense", nullable=True),
        _json("evaluation", nullable=True),
        _json("funding", nullable=True),
        _json("keywords"),
        _json("research_areas"),
        _url("thesis_repository"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_thesis_status", "thesis_supervisions", ["status"])
    op.create_index("ix_thesis_supervisor", "thesis_supervisions", ["supervisor"])
    op.create_index("ix_thesis_start", "thesis_supervisions", ["start_date"])

    op.create_table(
        "events",
        *_record(),
        *_review(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("abstract", sa.Text(), nullable=True),
        sa.Column("event_type", sa.String(length=32), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=True),
        sa.Column("organizer", sa.String(length=36), nullable=False),
        _json("co_organizers"),
        _json("external_organizers"),
        sa.Column("department", sa.String(length=64), nullable=False),
        sa.Column("event_format", sa.String(length=16), nullable=False),
        _json("venue", nullable=True),
        _json("online_platform", nullable=True),
        _when("start_date", nullable=False),
        _when("end_date", nullable=False),
        sa.Column("start_time", sa.String(length=20), nullable=False),
        sa.Column("end_time", sa.String(length=20), nullable=False),
        sa.Column("timezone", sa.String(length=32), nullable=False),
        _json("registration"),
        _json("speakers"),
        _json("participants"),
        sa.Column("status", sa.String(length=32), nullable=False),
        _json("funding", nullable=True),
        _json("keywords"),
        _json("research_areas"),
        _url("event_website"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_events_status", "events", ["status"])
    op.create_index("ix_events_organizer", "events", ["organizer"])
    op.create_index("ix_events_type", "events", ["event_type"])
    op.create_index("ix_events_start", "events", ["start_date"])

    op.create_table(
        "travel_grants",
        *_record(),
        *_review(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("purpose", sa.String(length=500), nullable=False),
        _json("event"),
        sa.Column("applicant", sa.String(length=36), nullable=False),
        sa.Column("department", sa.String(length=64), nullable=False),
        _json("travel_details"),
        _json("funding"),
        _json("budget_breakdown"),
        sa.Column("status", sa.String(length=32), nullable=False),
        _when("submitted_date"),
        sa.Column("approved_by", sa.String(length=36), nullable=True),
        _json("post_travel", nullable=True),
        _json("keywords"),
        _json("research_areas"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_travel_grants_status", "travel_grants", ["status"])
    op.create_index("ix_travel_grants_applicant", "travel_grants", ["applicant"])

    op.create_table(
        "contacts",
        *_record(),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("subject", sa.String(length=200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("contact_type", sa.String(length=32), nullable=False),
        sa.Column("priority", sa.String(length=16), nullable=False),
        sa.Column("organization", sa.String(length=100), nullable=True),
        sa.Column("position", sa.String(length=100), nullable=True),
        sa.Column("department", sa.String(length=100), nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False),
        _json("response", nullable=True),
        sa.Column("assigned_to", sa.String(length=36), nullable=True),
        sa.Column("source", sa.String(length=32), nullable=False),
        _json("tags"),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("user_agent", sa.String(length=512), nullable=True),
    )
    op.create_index("ix_contacts_email", "contacts", ["email"])
    op.create_index("ix_contacts_status", "contacts", ["status"])
    op.create_index("ix_contacts_type", "contacts", ["contact_type"])
    op.create_index("ix_contacts_priority", "contacts", ["priority"])
    op.create_index("ix_contacts_created", "contacts", ["created_at"])


def downgrade():
    for table in (
        "contacts",
        "travel_grants",
        "events",
        "thesis_supervisions",
        "final_year_projects",
        "funded_projects",
        "publications",
        "users",
    ):
        op.drop_table(table)
