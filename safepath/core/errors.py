"""Base exception classes for safepath"""

from typing import Any, Dict, Optional


class SafepathError(Exception):
    """Base exception for all safepath errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnhandledVariantError(SafepathError):
    """Raised when an error variant reaches a site that does not handle it"""

    def __init__(self, site: str, variant: Any):
        self.site = site
        self.variant = variant
        super().__init__(
            f"Unhandled variant at '{site}': {variant!r}",
            {
                "site": site,
                "variant": type(variant).__name__
            }
        )
