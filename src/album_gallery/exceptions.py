class GalleryError(Exception):
    """Base exception for album gallery service."""


class ConfigurationError(GalleryError):
    """Raised when configuration values are missing or invalid."""


class AlbumNotFoundError(GalleryError):
    """Raised when an album id is not in the catalog."""


class ProviderError(GalleryError):
    """Raised when a single upstream LLM provider call fails."""

    def __init__(self, provider: str, message: str, timed_out: bool = False):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.timed_out = timed_out


class NoProvidersConfiguredError(GalleryError):
    """Raised when no provider has an API key configured."""


class AllProvidersFailedError(GalleryError):
    """Raised when every configured provider failed."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])


class UpstreamTimeoutError(AllProvidersFailedError):
    """Raised when every configured provider timed out."""


class ApiError(GalleryError):
    """Raised by the API client when the backend answers with an error."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
