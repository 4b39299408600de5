from app.core.security import create_access_token, hash_password
from app.core.types import UserRole
from app.models.user import User
from app.policies.rbac import Principal


def make_user(db, email, role="faculty", first_name="Test", last_name="User", department="Computer Science", **extra):
    user = User(
        email=email,
        password_hash=hash_password("secret123"),
        first_name=first_name,
        last_name=last_name,
        role=role,
        department=department,
        is_active=True,
        **extra,
    )
    db.add(user)
    db.commit()
    return user


def principal_for(user) -> Principal:
    return Principal(
        user_id=user.id,
        role=UserRole(user.role),
        email=user.email,
        display_name=user.full_name,
    )


def auth_header(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}


# ─────────── request bodies ───────────


def publication_body(**overrides):
    body = {
        "title": "Deep Learning for Crop Yield",
        "publicationType": "Journal Article",
        "publicationDate": "2024-03-01T00:00:00Z",
        "department": "Computer Science",
        "authors": [{"name": "Ali Khan", "authorOrder": 1}],
    }
    body.update(overrides)
    return body


def project_body(agency="HEC", budget=100000, **overrides):
    body = {
        "title": "Smart Grid Monitoring",
        "projectType": "Research",
        "fundingAgency": {"name": agency},
        "totalBudget": budget,
        "department": "Computer Science",
        "startDate": "2024-01-15T00:00:00Z",
        "endDate": "2025-01-15T00:00:00Z",
        "duration": 12,
    }
    body.update(overrides)
    return body


def fyp_body(**overrides):
    body = {
        "title": "Campus Navigation App",
        "projectType": "FYP",
        "student": {
            "name": "Hina Shah",
            "rollNumber": "CS-2020-01",
            "email": "hina@student.uni.edu",
            "batch": "2020",
            "degree": "BS",
            "department": "Computer Science",
        },
        "startDate": "2024-02-01T00:00:00Z",
        "endDate": "2024-12-01T00:00:00Z",
    }
    body.update(overrides)
    return body


def thesis_body(**overrides):
    body = {
        "title": "Graph Methods for Fraud Detection",
        "thesisType": "MS",
        "degree": "MS",
        "student": {
            "name": "Omar Ali",
            "rollNumber": "MS-2022-07",
            "email": "omar@student.uni.edu",
            "batch": "2022",
            "department": "Computer Science",
        },
        "startDate": "2023-09-01T00:00:00Z",
        "expectedCompletionDate": "2025-09-01T00:00:00Z",
        "researchArea": "Machine Learning",
    }
    body.update(overrides)
    return body


def event_body(**overrides):
    body = {
        "title": "Workshop on Applied AI",
        "eventType": "Workshop",
        "department": "Computer Science",
        "eventFormat": "Physical",
        "startDate": "2030-05-10T00:00:00Z",
        "endDate": "2030-05-11T00:00:00Z",
        "startTime": "09:00",
        "endTime": "17:00",
    }
    body.update(overrides)
    return body


def travel_body(amount=150000, agency="HEC", **overrides):
    body = {
        "title": "Paper Presentation at ICML",
        "purpose": "Present an accepted paper at the main track",
        "event": {
            "name": "ICML 2024",
            "type": "Conference",
            "startDate": "2024-07-21T00:00:00Z",
            "endDate": "2024-07-27T00:00:00Z",
        },
        "department": "Computer Science",
        "travelDetails": {
            "departureDate": "2024-07-19T00:00:00Z",
            "returnDate": "2024-07-29T00:00:00Z",
            "departureCity": "Lahore",
            "destinationCity": "Vienna",
            "destinationCountry": "Austria",
        },
        "funding": {"fundingAgency": {"name": agency}, "totalAmount": amount},
    }
    body.update(overrides)
    return body


def contact_body(**overrides):
    body = {
        "firstName": "Zara",
        "lastName": "Iqbal",
        "email": "zara@example.com",
        "subject": "Collaboration inquiry",
        "message": "We would like to discuss a joint research project.",
    }
    body.update(overrides)
    return body
