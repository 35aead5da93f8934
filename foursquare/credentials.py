"""Authentication data attached to every request as query parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class AppCredentials:
    """Application-level (userless) access: client id and secret."""

    client_id: str
    client_secret: str = field(repr=False)


@dataclass(frozen=True)
class UserCredentials:
    """User-level access via an OAuth token."""

    oauth_token: str = field(repr=False)


Credentials = Union[AppCredentials, UserCredentials]
