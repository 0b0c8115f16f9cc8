"""Public package exports for the Flickr API client."""

from .client import FlickrClient
from .config import Credentials, FlickrClientConfig
from .core.errors import ErrorRecord, FlickrApiError
from .core.models import ApiResult

__all__ = [
    "FlickrClient",
    "FlickrClientConfig",
    "Credentials",
    "ApiResult",
    "ErrorRecord",
    "FlickrApiError",
]
