from .database import Datastore, get_datastore
from .config import settings, setup_logging
from .exceptions import (
    custom_http_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)


__all__ = [
    "settings",
    "Datastore",
    "get_datastore",
    "setup_logging",
    "custom_http_exception_handler",
    "validation_exception_handler",
    "unhandled_exception_handler",
]
