from __future__ import annotations

from typing import Optional, List, Union

from pydantic import BaseModel, ConfigDict, Field

from .base import PortfolioDocument


class Skill(BaseModel):
    name: Optional[str] = None
    percentage: Optional[Union[int, float]] = None


class ProfileCard(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image: Optional[str] = None
    title: Optional[str] = None
    domain: List[str] = Field(default_factory=list)
    education: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    other_skills: List[str] = Field(default_factory=list, alias="otherSkills")
    interests: List[str] = Field(default_factory=list)
    projects_completed: Optional[Union[int, float]] = Field(None, alias="projectsCompleted")


class About(BaseModel):
    description: Optional[str] = None
    profile: Optional[ProfileCard] = None


class Profile(PortfolioDocument):
    """The site owner's profile. Meant to be a single record, but not enforced."""

    name: str
    job_role: str = Field(..., alias="jobRole")
    experience: str
    address: str
    skills: List[Skill] = Field(default_factory=list)
    about: Optional[About] = None

    class Settings:
        name = "profiles"
