from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import httpx

from ..config.settings import ApiSettings
from ..domain import FieldError, normalize_field_name
from .errors import AuthenticationRequiredError, FieldValidationFailure, StoreError
from .tokens import TokenStore

logger = logging.getLogger(__name__)


def parse_field_errors(body: Any) -> Optional[List[FieldError]]:
    """Extract field errors from an error body, or ``None`` when it has no field shape.

    Accepts ``{"errors": {field: [msg, ...]}}`` and the list form
    ``{"errors": [{"propertyName": ..., "errorMessage": ...}]}``.
    """

    if not isinstance(body, dict):
        return None
    errors = body.get("errors")
    collected: List[FieldError] = []
    if isinstance(errors, dict):
        for key, messages in errors.items():
            if isinstance(messages, str):
                messages = [messages]
            if not isinstance(messages, list):
                continue
            name = normalize_field_name(str(key))
            collected.extend(FieldError(name, str(message)) for message in messages if message)
    elif isinstance(errors, list):
        for item in errors:
            if not isinstance(item, dict) or "propertyName" not in item:
                continue
            name = normalize_field_name(str(item["propertyName"]))
            collected.append(FieldError(name, str(item.get("errorMessage") or "")))
    return collected or None


def _opaque_message(response: httpx.Response, body: Any) -> str:
    if isinstance(body, dict):
        for key in ("detail", "title", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"{response.status_code} {response.reason_phrase}".strip()


@dataclass
class ApiGateway:
    """``httpx`` wrapper that attaches the bearer token and normalizes failures."""

    settings: ApiSettings
    tokens: TokenStore
    on_unauthorized: Optional[Callable[[], None]] = None
    _client: Optional[httpx.Client] = field(default=None, repr=False)

    def ensure_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            raise StoreError("API base URL is not configured.")
        self._client = httpx.Client(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout_seconds,
            headers={"Content-Type": "application/json"},
        )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _headers(self) -> Dict[str, str]:
        token = self.tokens.get()
        return {"Authorization": f"Bearer {token}"} if token else {}

    def request(self, method: str, path: str, *, json: Any = None) -> Any:
        client = self.ensure_client()
        logger.debug("%s %s", method, path)
        try:
            response = client.request(method, path, json=json, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise StoreError(f"Sunucuya ulaşılamadı: {exc}") from exc

        if response.status_code == 401:
            self.tokens.clear()
            if self.on_unauthorized is not None:
                self.on_unauthorized()
            raise AuthenticationRequiredError("Oturum geçersiz.", status_code=401)

        body = self._decode(response)
        if response.is_error:
            field_errors = parse_field_errors(body) if response.status_code < 500 else None
            if field_errors:
                logger.info("%s %s rejected fields: %s", method, path, [e.field for e in field_errors])
                raise FieldValidationFailure(field_errors, status_code=response.status_code)
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise StoreError(_opaque_message(response, body), status_code=response.status_code)
        if body is _MALFORMED:
            raise StoreError("Sunucu yanıtı okunamadı.", status_code=response.status_code)
        return body

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return _MALFORMED


_MALFORMED = object()
