"""
Tests for the portfolio REST client, using real ``requests.Response``
objects behind a mocked session.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests
from pydantic import TypeAdapter

from models.contact import Attachment
from models.portfolio import Single, Collection, ResourceResult, normalize_payload
from services.portfolio_api import PortfolioClient, PortfolioAPIError


def make_response(status=200, body=None, raw=None):
    response = requests.Response()
    response.status_code = status
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body).encode() if body is not None else b""
    response.url = "http://portfolio.test/api"
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session, headers={})


@pytest.fixture
def client(session):
    return PortfolioClient(base_url="http://portfolio.test/api/", timeout=10, session=session)


def test_bare_object_becomes_single(client, session):
    session.request.return_value = make_response(body={"name": "Raj"})

    result = client.get_about_primary()

    assert isinstance(result, Single)
    assert result.items == [{"name": "Raj"}]
    session.request.assert_called_once_with("GET", "http://portfolio.test/api/about/primary", timeout=10)


def test_array_stays_collection(client, session):
    projects = [{"title": "A"}, {"title": "B"}]
    session.request.return_value = make_response(body=projects)

    result = client.get_projects()

    assert isinstance(result, Collection)
    assert result.items == projects


def test_empty_body_is_empty_collection(client, session):
    session.request.return_value = make_response(status=204)
    assert client.get_skills().items == []


@pytest.mark.parametrize("call, path", [
    (lambda c: c.get_about_all(), "/about"),
    (lambda c: c.get_about("42"), "/about/42"),
    (lambda c: c.get_skills_by_category("data"), "/skills/category/data"),
    (lambda c: c.get_featured_projects(), "/projects/featured"),
    (lambda c: c.get_projects_by_category("ai"), "/projects/category/ai"),
    (lambda c: c.get_experience(), "/experience"),
])
def test_read_paths(client, session, call, path):
    session.request.return_value = make_response(body=[])
    call(client)
    assert session.request.call_args[0] == ("GET", f"http://portfolio.test/api{path}")


def test_server_error_raises(client, session, caplog):
    session.request.return_value = make_response(status=500, body={"error": "boom"})

    with pytest.raises(PortfolioAPIError) as excinfo:
        client.get_projects()

    assert excinfo.value.status_code == 500
    assert excinfo.value.url == "http://portfolio.test/api/projects"
    assert "API Error" in caplog.text


def test_timeout_raises_without_retry(client, session):
    session.request.side_effect = requests.Timeout("read timed out")

    with pytest.raises(PortfolioAPIError) as excinfo:
        client.get_experience()

    assert excinfo.value.status_code is None
    assert session.request.call_count == 1


def test_invalid_json_raises(client, session):
    session.request.return_value = make_response(raw=b"<html>")
    with pytest.raises(PortfolioAPIError):
        client.get_about_primary()


def test_submit_contact_sends_multipart_parts(client, session):
    session.request.return_value = make_response(body={"ok": True})
    contact = {"name": "Raj", "email": "raj@gmail.com", "subject": "Hello", "message": "Hello there!"}
    attachment = Attachment(filename="cv.pdf", content_type="application/pdf", content=b"%PDF",
                            size=4, size_label="4 B")

    client.submit_contact(contact, attachment)

    method, url = session.request.call_args[0]
    files = session.request.call_args[1]["files"]
    assert (method, url) == ("POST", "http://portfolio.test/api/contact")
    assert set(files) == {"contact", "file"}
    name, payload, content_type = files["contact"]
    assert content_type == "application/json"
    assert json.loads(payload) == contact
    assert files["file"] == ("cv.pdf", b"%PDF", "application/pdf")


def test_submit_contact_without_attachment(client, session):
    session.request.return_value = make_response(status=201)
    client.submit_contact({"name": "Raj"})
    assert set(session.request.call_args[1]["files"]) == {"contact"}


def test_interest_email_posts_json(client, session):
    session.request.return_value = make_response(body={})
    client.send_interest_email("raj@gmail.com")
    assert session.request.call_args[1]["json"] == {"email": "raj@gmail.com"}
    assert session.request.call_args[0][1].endswith("/contact/interest")


@pytest.mark.parametrize("payload, kind", [
    ({"name": "Raj"}, "single"),
    ([{"title": "A"}], "collection"),
    (None, "collection"),
])
def test_read_result_is_tagged_by_kind(payload, kind):
    adapter = TypeAdapter(ResourceResult)
    result = normalize_payload(payload)

    dumped = adapter.dump_python(result)
    assert dumped["kind"] == kind

    restored = adapter.validate_python(dumped)
    assert type(restored) is type(result)
    assert restored.items == result.items
