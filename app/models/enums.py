#app/models/enums.py
from __future__ import annotations
from enum import Enum


# ─────────── STATUS VOCABULARIES ───────────


class PublicationStatus(str, Enum):
    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    PUBLISHED = "Published"


class ProjectStatus(str, Enum):
    PROPOSED = "Proposed"
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    APPROVED = "Approved"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    TERMINATED = "Terminated"
    SUSPENDED = "Suspended"
    REJECTED = "Rejected"


class FypStatus(str, Enum):
    PROPOSED = "Proposed"
    APPROVED = "Approved"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DEFENDED = "Defended"
    GRADED = "Graded"
    REJECTED = "Rejected"


class ThesisStatus(str, Enum):
    PROPOSED = "Proposed"
    APPROVED = "Approved"
    COURSE_WORK = "Course Work"
    RESEARCH_PROPOSAL = "Research Proposal"
    DATA_COLLECTION = "Data Collection"
    ANALYSIS = "Analysis"
    WRITING = "Writing"
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    DEFENDED = "Defended"
    COMPLETED = "Completed"
    GRADUATED = "Graduated"
    WITHDRAWN = "Withdrawn"
    REJECTED = "Rejected"


class EventStatus(str, Enum):
    PLANNED = "Planned"
    SCHEDULED = "Scheduled"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    POSTPONED = "Postponed"
    PROPOSED = "Proposed"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class TravelStatus(str, Enum):
    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class ContactStatus(str, Enum):
    NEW = "new"
    IN_PROGRESS = "in-progress"
    RESPONDED = "responded"
    RESOLVED = "resolved"
    CLOSED = "closed"


# ─────────── TYPE / CATEGORY VOCABULARIES ───────────


class PublicationType(str, Enum):
    JOURNAL_ARTICLE = "Journal Article"
    CONFERENCE_PAPER = "Conference Paper"
    BOOK_CHAPTER = "Book Chapter"
    BOOK = "Book"
    PATENT = "Patent"
    TECHNICAL_REPORT = "Technical Report"
    OTHER = "Other"


class Quartile(str, Enum):
    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"


class ProjectType(str, Enum):
    RESEARCH = "Research"
    DEVELOPMENT = "Development"
    CONSULTANCY = "Consultancy"
    TRAINING = "Training"
    INFRASTRUCTURE = "Infrastructure"
    OTHER = "Other"


class ProjectCategory(str, Enum):
    NATIONAL = "National"
    INTERNATIONAL = "International"
    INDUSTRY = "Industry"
    GOVERNMENT = "Government"
    NGO = "NGO"
    OTHER = "Other"


class AgencyType(str, Enum):
    UNIVERSITY = "University"
    GOVERNMENT = "Government"
    PRIVATE = "Private"
    INTERNATIONAL = "International"
    NGO = "NGO"
    INDUSTRY = "Industry"
    EXTERNAL = "External"


class FypType(str, Enum):
    FYP = "FYP"
    CAPSTONE = "Capstone"
    THESIS = "Thesis"
    RESEARCH_PROJECT = "Research Project"
    DESIGN_PROJECT = "Design Project"


class FypDegree(str, Enum):
    BS = "BS"
    BE = "BE"
    BSC = "BSc"
    MS = "MS"
    MSC = "MSc"
    ME = "ME"
    MPHIL = "MPhil"
    PHD = "PhD"


class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D = "D"
    F = "F"


class ThesisDegree(str, Enum):
    MS = "MS"
    MSC = "MSc"
    MPHIL = "MPhil"
    PHD = "PhD"
    POST_DOC = "Post Doc"


class DefenseResult(str, Enum):
    PASS = "Pass"
    MINOR_REVISIONS = "Pass with Minor Revisions"
    MAJOR_REVISIONS = "Pass with Major Revisions"
    FAIL = "Fail"
    PENDING = "Pending"


class CommitteeRole(str, Enum):
    CHAIR = "Chair"
    MEMBER = "Member"
    EXTERNAL_EXAMINER = "External Examiner"
    INTERNAL_EXAMINER = "Internal Examiner"


class EventType(str, Enum):
    SEMINAR = "Seminar"
    WORKSHOP = "Workshop"
    CONFERENCE = "Conference"
    SYMPOSIUM = "Symposium"
    TRAINING = "Training"
    WEBINAR = "Webinar"
    OTHER = "Other"


class EventFormat(str, Enum):
    PHYSICAL = "Physical"
    ONLINE = "Online"
    HYBRID = "Hybrid"


class AttendanceStatus(str, Enum):
    REGISTERED = "Registered"
    ATTENDED = "Attended"
    ABSENT = "Absent"


class TravelEventType(str, Enum):
    CONFERENCE = "Conference"
    WORKSHOP = "Workshop"
    SEMINAR = "Seminar"
    TRAINING = "Training"
    RESEARCH_VISIT = "Research Visit"
    COLLABORATION = "Collaboration"
    OTHER = "Other"


class ContactType(str, Enum):
    GENERAL = "general"
    RESEARCH = "research"
    ADMISSION = "admission"
    COLLABORATION = "collaboration"
    MEDIA = "media"
    COMPLAINT = "complaint"
    SUGGESTION = "suggestion"
    OTHER = "other"


class ContactPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ContactSource(str, Enum):
    WEBSITE = "website"
    EMAIL = "email"
    PHONE = "phone"
    SOCIAL_MEDIA = "social-media"
    REFERRAL = "referral"
    OTHER = "other"


class FypCategory(str, Enum):
    SOFTWARE = "Software"
    HARDWARE = "Hardware"
    RESEARCH = "Research"
    DESIGN = "Design"
    ANALYSIS = "Analysis"
    IMPLEMENTATION = "Implementation"
    OTHER = "Other"


class EventCategory(str, Enum):
    ACADEMIC = "Academic"
    RESEARCH = "Research"
    PROFESSIONAL_DEVELOPMENT = "Professional Development"
    INDUSTRY = "Industry"
    COMMUNITY = "Community"
    OTHER = "Other"


class SponsorType(str, Enum):
    UNIVERSITY = "University"
    EXTERNAL = "External"
    INDUSTRY = "Industry"
    GOVERNMENT = "Government"
    NGO = "NGO"
