import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from user_session_web.middleware import MethodOverrideMiddleware


@pytest.fixture
def probe_client():
    probe = FastAPI()
    probe.add_middleware(MethodOverrideMiddleware)

    @probe.api_route("/probe", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
    async def echo(request: Request):
        form = await request.form()
        return {"method": request.method, "form": dict(form)}

    with TestClient(probe) as client:
        yield client


def test_query_string_override(probe_client):
    response = probe_client.post("/probe?_method=DELETE")
    assert response.json()["method"] == "DELETE"


def test_body_override_keeps_form_readable(probe_client):
    response = probe_client.post("/probe", data={"_method": "put", "name": "value"})
    body = response.json()
    assert body["method"] == "PUT"
    assert body["form"] == {"_method": "put", "name": "value"}


def test_plain_post_untouched(probe_client):
    response = probe_client.post("/probe", data={"name": "value"})
    assert response.json() == {"method": "POST", "form": {"name": "value"}}


def test_unsupported_override_ignored(probe_client):
    response = probe_client.post("/probe?_method=TRACE")
    assert response.json()["method"] == "POST"


def test_get_is_never_overridden(probe_client):
    response = probe_client.get("/probe?_method=DELETE")
    assert response.json()["method"] == "GET"
