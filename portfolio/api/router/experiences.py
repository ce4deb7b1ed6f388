from portfolio.models import Experience
from .crud import build_crud_router

# Periods are free text, so this is a string sort ("2024" > "2023 - 2024").
experience_router = build_crud_router(Experience, "Experience", sort_desc="period")
