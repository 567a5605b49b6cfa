"""
Domain services.

These services orchestrate higher-level workflows while depending only on
domain models and ports so that infrastructure and HTTP layers can remain thin.
"""

from .job_tracker import JobTrackerService

__all__ = [
    "JobTrackerService",
]
