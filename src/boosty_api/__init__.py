"""Async client for the Boosty content platform API."""

from boosty_api.auth import AuthManager, CredentialStore, TokenRefresher
from boosty_api.client import BoostyClient
from boosty_api.config import Config, Settings, get_config
from boosty_api.services.comments import CommentService
from boosty_api.services.posts import PostService
from boosty_api.services.showcase import ShowcaseService
from boosty_api.services.subscriptions import SubscriptionService
from boosty_api.services.targets import TargetService
from boosty_api.utils.errors import (
    ApiError,
    AuthError,
    BoostyError,
    ConfigurationError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AuthError",
    "AuthManager",
    "BoostyClient",
    "BoostyError",
    "CommentService",
    "Config",
    "ConfigurationError",
    "CredentialStore",
    "PostService",
    "Settings",
    "ShowcaseService",
    "SubscriptionService",
    "TargetService",
    "TokenRefresher",
    "TransportError",
    "get_config",
]
