from typing import Optional, List

from pydantic import Field

from .base import PortfolioDocument


class Project(PortfolioDocument):
    image: Optional[str] = None  # image url or base64 string
    title: str
    description: Optional[str] = None
    technology: List[str] = Field(default_factory=list)

    class Settings:
        name = "projects"
