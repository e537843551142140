"""Training API integration: templates, block library and session scheduling."""

from .client import CoachApiClient, CoachApiError, client_from_env

__all__ = [
    "CoachApiClient",
    "CoachApiError",
    "client_from_env",
]
