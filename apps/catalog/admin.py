# Admin registration lives with the interfaces layer
from .interfaces import admin  # noqa: F401
