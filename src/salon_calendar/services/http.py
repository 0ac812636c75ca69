"""Local development server implementing the events API over the JSON store."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, FastAPI, Header, HTTPException
from fastapi.responses import JSONResponse, Response
from hypercorn.asyncio import serve
from hypercorn.config import Config

from ..api import serialize_event
from ..data import EventNotFoundError, EventRepository
from ..domain import EventDraft, FieldError, validate_event

logger = logging.getLogger(__name__)


def _errors_body(errors: List[FieldError]) -> Dict[str, Any]:
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        grouped.setdefault(error.field, []).append(error.message)
    return {"errors": grouped}


def create_app(repository: EventRepository, *, token: Optional[str] = None) -> FastAPI:
    app = FastAPI(title="Salon Calendar API", version="1.0.0")
    router = APIRouter(prefix="/api")

    def require_token(authorization: Optional[str] = Header(default=None)) -> None:
        if token is None:
            return
        if authorization != f"Bearer {token}":
            raise HTTPException(status_code=401, detail="Unauthorized")

    def validated(payload: Dict[str, Any]) -> Union[EventDraft, JSONResponse]:
        draft = EventDraft.from_record(payload)
        errors = validate_event(draft)
        if errors:
            return JSONResponse(status_code=400, content=_errors_body(errors))
        return draft

    def not_found(exc: EventNotFoundError) -> HTTPException:
        return HTTPException(status_code=404, detail=exc.message)

    @router.get("/events", dependencies=[Depends(require_token)])
    def list_events() -> List[Dict[str, Any]]:
        return [serialize_event(event) for event in repository.list()]

    @router.get("/events/{event_id}", dependencies=[Depends(require_token)])
    def get_event(event_id: str) -> Dict[str, Any]:
        try:
            return serialize_event(repository.get(event_id))
        except EventNotFoundError as exc:
            raise not_found(exc) from exc

    @router.post("/events", status_code=201, dependencies=[Depends(require_token)])
    def create_event(payload: Dict[str, Any]) -> Any:
        result = validated(payload)
        if isinstance(result, JSONResponse):
            return result
        created = repository.create(result.to_event())
        logger.info("Created event %s", created.id)
        return serialize_event(created)

    @router.put("/events", dependencies=[Depends(require_token)])
    def update_event(payload: Dict[str, Any]) -> Any:
        event_id = payload.get("id")
        if not event_id:
            return JSONResponse(status_code=400, content={"errors": {"id": ["Event id zorunludur"]}})
        result = validated(payload)
        if isinstance(result, JSONResponse):
            return result
        try:
            updated = repository.update(str(event_id), result.to_event(event_id=str(event_id)))
        except EventNotFoundError as exc:
            raise not_found(exc) from exc
        return serialize_event(updated)

    @router.delete("/events/{event_id}", status_code=204, dependencies=[Depends(require_token)])
    def delete_event(event_id: str) -> Response:
        try:
            repository.delete(event_id)
        except EventNotFoundError as exc:
            raise not_found(exc) from exc
        return Response(status_code=204)

    app.include_router(router)
    return app


async def _serve(app: FastAPI, config: Config) -> None:
    await serve(app, config)


def run_local_server(repository: EventRepository, *, host: str = "127.0.0.1", port: int = 5170, token: Optional[str] = None) -> None:
    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving events API on http://%s:%s/api", host, port)
    asyncio.run(_serve(create_app(repository, token=token), config))
