# pdi_site/services/people.py
from typing import Optional

from pdi_site import config
from pdi_site.models.content import PersonRecord
from pdi_site.services.lookups import category_id, department_name

GRAD_STUDENT_ID = category_id("gradStudent")

def get_person_role(person: PersonRecord, workspace_id: Optional[str] = None) -> Optional[str]:
    """
    Single display role for a person, first match wins:
      internal workspace role > faculty title > institution > "Graduate Student[, Dept]".

    An internal person whose roles don't include the home workspace gets None;
    the faculty/institution fallbacks are not consulted for them.
    """
    workspace_id = workspace_id or config.HOME_WORKSPACE_ID

    if person.affiliation_type == "internal" and person.internal_roles:
        for r in person.internal_roles:
            if r.organization.id == workspace_id:
                return r.title
        return None
    if person.faculty_title:
        return person.faculty_title
    if person.institution:
        return person.institution
    if any(c is not None and c.id == GRAD_STUDENT_ID for c in person.categories):
        role = "Graduate Student"
        dept = department_name(person.department)
        if dept:
            role += f", {dept}"
        return role
    return None
