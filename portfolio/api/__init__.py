from .router import api_router, health_check

__all__ = ["api_router", "health_check"]
