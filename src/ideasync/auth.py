"""Bearer token providers.

Token issuance is owned by an external identity provider. The stores only
need something they can await for a token before each request, so a provider
is any zero-argument async callable returning the token or None.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from ideasync.config import Config

__all__ = ["StaticTokenProvider", "TokenProvider", "token_provider_from_config"]

TokenProvider = Callable[[], Awaitable[str | None]]


class StaticTokenProvider:
    """Provider that always hands out the same token.

    A blank token is reported as missing rather than sent.
    """

    __slots__: Final = ("_token",)

    def __init__(self, token: str | None) -> None:
        self._token: str | None = token.strip() if token else None

    async def __call__(self) -> str | None:
        return self._token or None

    def __repr__(self) -> str:
        state = "set" if self._token else "unset"
        return f"StaticTokenProvider(<{state}>)"


def token_provider_from_config(config: Config) -> StaticTokenProvider:
    """Build a provider from the `auth.token` setting."""
    return StaticTokenProvider(config.auth.token)
