"""
Domain layer package.

This package contains pure business logic models and ports that are
independent of any specific infrastructure or frameworks.
"""

from .errors import (  # noqa: F401
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    TrackerError,
    ValidationError,
)
from .models import (  # noqa: F401
    AppConfig,
    AuthenticatedUser,
    NewTrackedJob,
    TrackedJob,
    TrackedJobStatus,
    TrackerNote,
    TrackerStats,
)
from .ports import (  # noqa: F401
    ClockPort,
    ConfigProviderPort,
    IdGeneratorPort,
    LoggerPort,
    TokenVerifierPort,
    TrackedJobRepositoryPort,
)

__all__ = [
    # Models
    "AppConfig",
    "AuthenticatedUser",
    "NewTrackedJob",
    "TrackedJob",
    "TrackedJobStatus",
    "TrackerNote",
    "TrackerStats",
    # Errors
    "TrackerError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    # Ports
    "TrackedJobRepositoryPort",
    "TokenVerifierPort",
    "ConfigProviderPort",
    "ClockPort",
    "IdGeneratorPort",
    "LoggerPort",
]
