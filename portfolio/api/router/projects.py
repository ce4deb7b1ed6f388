from portfolio.models import Project
from .crud import build_crud_router

project_router = build_crud_router(Project, "Project")
