from .project import Project
from .experience import Experience
from .profile import Profile, Skill, About, ProfileCard

DOCUMENT_MODELS = [Project, Experience, Profile]

__all__ = [
    "Project",
    "Experience",
    "Profile",
    "Skill",
    "About",
    "ProfileCard",
    "DOCUMENT_MODELS",
]
