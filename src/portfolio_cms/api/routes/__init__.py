"""Route handlers for the API."""

from portfolio_cms.api.routes import contacts, health, hobbies, profile, projects, skills

__all__ = [
    "contacts",
    "health",
    "hobbies",
    "profile",
    "projects",
    "skills",
]
