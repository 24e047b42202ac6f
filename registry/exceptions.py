class RegistryError(Exception):
    """Base for all handicap registry errors."""


class AuthError(RegistryError):
    """Registry rejected the credentials or returned no golfer."""


class GolferNotFound(RegistryError):
    """No golfer matched the lookup."""


class UpstreamUnavailable(RegistryError):
    """Registry could not be reached or returned something unreadable."""
