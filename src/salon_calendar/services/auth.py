from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..data import TokenStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AuthService:
    tokens: TokenStore
    _login_handlers: List[Callable[[], None]] = field(default_factory=list)

    def sign_in(self, token: str) -> None:
        self.tokens.set(token)

    def sign_out(self) -> None:
        self.tokens.clear()

    def current_token(self) -> Optional[str]:
        return self.tokens.get()

    def on_login_required(self, handler: Callable[[], None]) -> None:
        self._login_handlers.append(handler)

    def login_required(self) -> None:
        """Entry point invoked after a 401; the token is already discarded by then."""

        logger.warning("Authentication required; redirecting to login")
        for handler in list(self._login_handlers):
            handler()
