"""
Domain errors raised by site resolution and site-scoped data access.
"""

from typing import Dict, Optional


class SiteNotFound(Exception):
    """
    A site-scoped operation needed the current site but none was resolved.

    Only raised when more than one site exists; single-site deployments
    skip scoping entirely.
    """

    def __init__(self, entity_name: str, hostname: Optional[str] = None):
        self.entity_name = entity_name
        self.hostname = hostname
        super().__init__(
            f"{entity_name} is site-scoped but no current site is resolved"
            f" (host={hostname!r})"
        )


class ValidationFailed(Exception):
    """Entity failed validation; errors maps field name to message"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{field} {message}" for field, message in errors.items())
        )
