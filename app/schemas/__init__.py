from app.schemas.common import CamelModel, DecisionRequest
from app.schemas.publications import PublicationCreate, PublicationReview
from app.schemas.funded_projects import FundedProjectCreate, FundedProjectReview
from app.schemas.fyp import FypCreate, GradeRequest
from app.schemas.thesis import ThesisCreate, DefenseRequest
from app.schemas.events import EventCreate, RegisterRequest, AttendanceRequest
from app.schemas.travel import TravelGrantCreate, TravelReview, PostTravelRequest
from app.schemas.contacts import ContactCreate, ContactUpdate, RespondRequest, BulkUpdateRequest
from app.schemas.reports import ReportRequest, ExportRequest
