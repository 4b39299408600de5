import pytest

from app.core.errors import Forbidden
from app.core.types import UserRole
from app.policies.ownership_policy import can_delete, can_edit, require_edit
from app.policies.rbac import Principal, require_admin
from app.services.funded_project_service import FundedProjectService
from app.tests.helpers import principal_for, project_body


def test_co_investigator_edits_but_cannot_delete(db, faculty, other_faculty, admin):
    body = project_body(coPrincipalInvestigators=[{"faculty": other_faculty.id}])
    project = FundedProjectService().create(db, principal=principal_for(faculty), payload=body)

    assert can_edit(principal_for(other_faculty), project)
    assert not can_delete(principal_for(other_faculty), project)
    assert can_delete(principal_for(faculty), project)
    assert can_delete(principal_for(admin), project)


def test_stranger_is_forbidden(db, faculty):
    stranger = Principal(user_id="someone-else", role=UserRole.faculty, email="x@uni.edu", display_name="X")
    project = FundedProjectService().create(db, principal=principal_for(faculty), payload=project_body())

    with pytest.raises(Forbidden) as exc:
        require_edit(stranger, project, "project")
    assert exc.value.message == "Not authorized to update this project"


def test_require_admin(faculty, admin):
    require_admin(principal_for(admin))
    with pytest.raises(Forbidden):
        require_admin(principal_for(faculty))
