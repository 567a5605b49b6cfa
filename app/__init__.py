"""HTTP layer package."""

from .api import DEFAULT_PREFIX, create_app, serialize_job

__all__ = ["DEFAULT_PREFIX", "create_app", "serialize_job"]
