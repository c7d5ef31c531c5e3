"""Python client for the PeerCat image generation API."""
__version__ = "0.1.0"

from peercat.config.settings import ClientConfig
from peercat.core.classifier import classify, is_retryable_status
from peercat.core.exceptions import (
    ErrorKind,
    PeerCatError,
    ApiError,
    AuthenticationError,
    InvalidRequestError,
    InsufficientCreditsError,
    RateLimitError,
    NotFoundError,
    ServerError,
    NetworkError,
    JsonError,
    ApiTimeoutError,
    UnknownApiError,
)
from peercat.execution.executor import RequestExecutor
from peercat.client import PeerCat
from peercat.models import *  # noqa: F401,F403
from peercat.models import __all__ as _models_all

__all__ = [
    "__version__",
    "ClientConfig",
    "classify",
    "is_retryable_status",
    "ErrorKind",
    "PeerCatError",
    "ApiError",
    "AuthenticationError",
    "InvalidRequestError",
    "InsufficientCreditsError",
    "RateLimitError",
    "NotFoundError",
    "ServerError",
    "NetworkError",
    "JsonError",
    "ApiTimeoutError",
    "UnknownApiError",
    "RequestExecutor",
    "PeerCat",
] + _models_all
