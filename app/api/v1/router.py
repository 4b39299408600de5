from fastapi import APIRouter

from app.api.v1.health import router as health_router
from app.api.v1.auth import router as auth_router
from app.api.v1.users import router as users_router

from app.api.v1.publications import router as publications_router
from app.api.v1.projects import router as projects_router
from app.api.v1.fyp import router as fyp_router
from app.api.v1.thesis import router as thesis_router
from app.api.v1.events import router as events_router
from app.api.v1.travel import router as travel_router

from app.api.v1.contacts import router as contacts_router
from app.api.v1.funding import router as funding_router
from app.api.v1.reports import router as reports_router


v1_router = APIRouter()

# ------------------------------------------------------------------
# SYSTEM / ACCOUNTS
# ------------------------------------------------------------------
v1_router.include_router(health_router, tags=["health"])
v1_router.include_router(auth_router, tags=["auth"])
v1_router.include_router(users_router, tags=["users"])

# ------------------------------------------------------------------
# RESEARCH RECORDS
# ------------------------------------------------------------------
v1_router.include_router(publications_router, tags=["publications"])
v1_router.include_router(projects_router, tags=["projects"])
v1_router.include_router(fyp_router, tags=["fyp"])
v1_router.include_router(thesis_router, tags=["thesis"])
v1_router.include_router(events_router, tags=["events"])
v1_router.include_router(travel_router, tags=["travel"])

# ------------------------------------------------------------------
# INQUIRIES / REPORTING
# ------------------------------------------------------------------
v1_router.include_router(contacts_router, tags=["contacts"])
v1_router.include_router(funding_router, tags=["funding"])
v1_router.include_router(reports_router, tags=["reports"])
