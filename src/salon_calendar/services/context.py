from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import ApiGateway, EventRepository, HttpEventRepository, JsonEventRepository, TokenStore
from ..domain import Viewport
from .auth import AuthService
from .notifications import Notifier
from .reconciliation import ReconciliationController

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root wiring settings, the selected event store and shared services."""

    settings: AppSettings = field(default_factory=get_settings)
    tokens: TokenStore = field(init=False)
    auth: AuthService = field(init=False)
    gateway: ApiGateway = field(init=False)
    events: EventRepository = field(init=False)
    notifier: Notifier = field(init=False)
    viewport: Viewport = field(init=False)

    def __post_init__(self) -> None:
        self.tokens = TokenStore(initial=self.settings.api.token)
        self.auth = AuthService(self.tokens)
        self.gateway = ApiGateway(self.settings.api, self.tokens, on_unauthorized=self.auth.login_required)
        if self.settings.storage.is_local:
            logger.info("Using local event store at %s", self.settings.storage.local_path)
            self.events = JsonEventRepository(self.settings.storage.local_path)
        else:
            logger.info("Using event API at %s", self.settings.api.base_url)
            self.events = HttpEventRepository(self.gateway)
        self.notifier = Notifier()
        self.viewport = Viewport(narrow_threshold=self.settings.ui.narrow_viewport_px)

    def create_controller(self) -> ReconciliationController:
        """Each rendered calendar gets its own controller and event list."""

        return ReconciliationController(self.events, self.notifier, self.viewport)

    def close(self) -> None:
        self.gateway.close()
