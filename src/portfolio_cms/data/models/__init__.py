"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- Profile: The portfolio owner's personal information
- Education / Certification: Profile history read by the profile statistics
- Skill: Skills with category and proficiency
- Project: Showcased projects with status and dates
- Hobby: Hobbies
- Contact: Messages from the contact form

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.contact import Contact
from portfolio_cms.data.models.education import Certification, Education
from portfolio_cms.data.models.hobby import Hobby
from portfolio_cms.data.models.profile import Profile
from portfolio_cms.data.models.project import Project
from portfolio_cms.data.models.skill import Skill

__all__ = [
    "Base",
    "Certification",
    "Contact",
    "Education",
    "Hobby",
    "Profile",
    "Project",
    "Skill",
]
