from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.security import hash_password
from app.core.types import UserRole
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.contact import Contact  # noqa: F401
from app.models.event import Event  # noqa: F401
from app.models.final_year_project import FinalYearProject  # noqa: F401
from app.models.funded_project import FundedProject  # noqa: F401
from app.models.publication import Publication  # noqa: F401
from app.models.thesis_supervision import ThesisSupervision  # noqa: F401
from app.models.travel_grant import TravelGrant  # noqa: F401
from app.models.user import User
from app.services.auth_service import find_by_email


def seed():
    """Create tables if missing and make sure the bootstrap admin exists."""
    settings = get_settings()
    Base.metadata.create_all(bind=engine)

    db: Session = SessionLocal()
    try:
        if find_by_email(db, settings.seed_admin_email) is None:
            db.add(
                User(
                    email=settings.seed_admin_email.lower(),
                    password_hash=hash_password(settings.seed_admin_password),
                    first_name="System",
                    last_name="Administrator",
                    role=UserRole.admin.value,
                    is_active=True,
                )
            )
            db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    seed()
