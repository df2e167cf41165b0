"""Services"""

from portfolio_cms.services.contacts import contact_store
from portfolio_cms.services.hobbies import hobby_store
from portfolio_cms.services.profiles import profile_store
from portfolio_cms.services.projects import project_store
from portfolio_cms.services.record_store import EntityDescriptor, RecordStore
from portfolio_cms.services.skills import skill_store

__all__ = [
    "EntityDescriptor",
    "RecordStore",
    "contact_store",
    "hobby_store",
    "profile_store",
    "project_store",
    "skill_store",
]
