# Django's admin autodiscovery imports this module.
from .interfaces import admin  # noqa: F401
