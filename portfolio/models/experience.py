from typing import Optional, List

from pydantic import Field

from .base import PortfolioDocument


class Experience(PortfolioDocument):
    period: str  # free text, e.g. "2024" or "2021 - 2023"
    position: str
    company: str
    company_description: Optional[str] = Field(None, alias="companyDescription")
    responsibilities: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)

    class Settings:
        name = "experiences"
