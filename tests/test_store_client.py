from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from salon_calendar.config import ApiSettings
from salon_calendar.data import (
    ApiGateway,
    AuthenticationRequiredError,
    FieldValidationFailure,
    HttpEventRepository,
    JsonEventRepository,
    StoreError,
    parse_field_errors,
)
from salon_calendar.domain import FieldError
from salon_calendar.services.http import create_app

from conftest import make_event

BASE_URL = "http://testserver/api"
SETTINGS = ApiSettings(base_url=BASE_URL, token=None, timeout_seconds=5.0)


def _repository(handler, tokens, on_unauthorized=None):
    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    gateway = ApiGateway(SETTINGS, tokens, on_unauthorized=on_unauthorized, _client=client)
    return HttpEventRepository(gateway)


def test_requests_carry_bearer_token(tokens):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, request.headers.get("Authorization")))
        return httpx.Response(200, json=[])

    assert _repository(handler, tokens).list() == []
    assert seen == [("GET", "/api/events", "Bearer secret-token")]


def test_missing_token_is_not_an_error(tmp_path):
    from salon_calendar.data import TokenStore

    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json=[])

    _repository(handler, TokenStore(tmp_path / "none")).list()

    assert seen == [None]


def test_create_posts_event_without_id_or_colors(tokens):
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        bodies.append((request.method, request.url.path, body))
        return httpx.Response(201, json={**body, "id": "srv-1", "createdDate": "2025-01-01T00:00:00"})

    created = _repository(handler, tokens).create(make_event(None))

    method, path, body = bodies[0]
    assert (method, path) == ("POST", "/api/events")
    assert "id" not in body
    assert "backgroundColor" not in body
    assert created.id == "srv-1"


def test_update_puts_to_collection_with_id_in_body(tokens):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        seen.append((request.method, request.url.path, body["id"]))
        return httpx.Response(200, json=body)

    _repository(handler, tokens).update("evt-9", make_event(None))

    assert seen == [("PUT", "/api/events", "evt-9")]


def test_field_errors_are_unwrapped(tokens):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"errors": {"Phone": ["Geçerli bir telefon numarası giriniz"]}})

    with pytest.raises(FieldValidationFailure) as info:
        _repository(handler, tokens).update("evt-1", make_event())

    assert info.value.errors == [FieldError("phone", "Geçerli bir telefon numarası giriniz")]
    assert info.value.status_code == 400


@pytest.mark.parametrize(
    "status, body",
    [
        (500, {"errors": {"phone": ["boom"]}}),
        (400, {"title": "Bad Request"}),
        (404, None),
        (400, "plain text failure"),
    ],
)
def test_unstructured_failures_are_opaque(tokens, status, body):
    def handler(request: httpx.Request) -> httpx.Response:
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    with pytest.raises(StoreError) as info:
        _repository(handler, tokens).delete("evt-1")

    assert not isinstance(info.value, FieldValidationFailure)
    assert info.value.status_code == status
    assert info.value.message


def test_transport_failure_is_opaque(tokens):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(StoreError):
        _repository(handler, tokens).list()
    assert len(calls) == 1


def test_malformed_success_body_is_opaque(tokens):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>")

    with pytest.raises(StoreError):
        _repository(handler, tokens).list()


def test_unauthorized_discards_token_and_redirects(tokens):
    redirects = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"errors": {"phone": ["ignored"]}})

    repository = _repository(handler, tokens, on_unauthorized=lambda: redirects.append("login"))
    with pytest.raises(AuthenticationRequiredError):
        repository.create(make_event(None))

    assert tokens.get() is None
    assert redirects == ["login"]


def test_parse_field_errors_list_shape():
    body = {"errors": [{"propertyName": "BrideName", "errorMessage": "Gelin adı zorunludur"}]}

    assert parse_field_errors(body) == [FieldError("brideName", "Gelin adı zorunludur")]
    assert parse_field_errors({"errors": {}}) is None
    assert parse_field_errors(["nope"]) is None


# ---------------------------------------------------------------- against the dev server


@pytest.fixture
def server_repository(tmp_path, tokens):
    app = create_app(JsonEventRepository(tmp_path / "events.json"), token="secret-token")
    client = TestClient(app, base_url=BASE_URL)
    return HttpEventRepository(ApiGateway(SETTINGS, tokens, _client=client))


def test_round_trip_through_dev_server(server_repository):
    created = server_repository.create(make_event(None))
    assert created.id and created.created_date is not None

    fetched = server_repository.get(created.id)
    assert fetched.hosted_name_surname == "Ayşe Yılmaz"

    server_repository.update(created.id, make_event(None, number_of_guests=300))
    assert [event.number_of_guests for event in server_repository.list()] == [300]

    server_repository.delete(created.id)
    assert server_repository.list() == []


def test_dev_server_reports_field_errors(server_repository):
    with pytest.raises(FieldValidationFailure) as info:
        server_repository.create(make_event(None, phone="532 123 4567"))

    assert info.value.errors == [FieldError("phone", "Geçerli bir telefon numarası giriniz")]


def test_dev_server_unknown_id_is_opaque(server_repository):
    with pytest.raises(StoreError) as info:
        server_repository.delete("missing")

    assert info.value.status_code == 404


def test_dev_server_rejects_missing_token(server_repository, tokens):
    tokens.clear()

    with pytest.raises(AuthenticationRequiredError):
        server_repository.list()


def test_dev_server_answers_400_for_non_text_phone(tmp_path):
    client = TestClient(create_app(JsonEventRepository(tmp_path / "events.json")), base_url=BASE_URL)
    payload = {**make_event(None).to_record(include_id=False), "phone": 5321234567}

    response = client.post("/events", json=payload)

    assert response.status_code == 400
    assert response.json() == {"errors": {"phone": ["Geçerli bir telefon numarası giriniz"]}}
