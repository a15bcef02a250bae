"""Application storage."""

from .application_store import ApplicationStore, MAX_APPLICATIONS

__all__ = ["ApplicationStore", "MAX_APPLICATIONS"]
