# errors.py
# exceptions shared by the provider, service and HTTP layers


class MissingApiKeyError(RuntimeError):
    """Raised when the generation provider is built without an API key."""


class ProviderAccessDenied(Exception):
    """Provider refused the key (blocked / permission denied)."""

    def __init__(self, reason: str, status_code: int = 403):
        super().__init__(f"{status_code} {reason}")
        self.reason = reason
        self.status_code = status_code


class ItineraryGenerationError(Exception):
    """Any provider failure that has no degraded-mode answer."""
