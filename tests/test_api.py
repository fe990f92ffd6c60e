from unittest import mock

import pytest

from demoqa_checks.api import API_CHECKS, ApiCheck, ApiClient, ApiResponse, run_api_check
from demoqa_checks.errors import AssertionFailed


@pytest.fixture
def client(stub_server):
    with ApiClient(stub_server, timeout=5) as client:
        yield client


def test_get_post(client):
    response = client.get("/posts/1")
    response.assert_status(200).assert_field("userId", 1).assert_field_present("title")
    assert response.field("id") == 1


def test_wrong_status_fails(client):
    response = client.get("/posts/999")
    with pytest.raises(AssertionFailed, match="expected status 200, got 404"):
        response.assert_status(200)


def test_wrong_field_fails(client):
    response = client.get("/posts/11")
    with pytest.raises(AssertionFailed, match="userId is 2, expected 1"):
        response.assert_field("userId", 1)


def test_missing_field_fails(client):
    with pytest.raises(AssertionFailed, match="'author' missing"):
        client.get("/posts/1").assert_field_present("author")


def test_post_with_json_body_and_header(client):
    response = client.post(
        "/posts",
        json={"title": "foo", "tags": [{"name": "a"}]},
        headers={"X-Trace": "1"},
    )
    response.assert_status(201).assert_field("tags.0.name", "a").assert_field("id", 101)


@pytest.mark.parametrize("check", API_CHECKS, ids=lambda c: c.name)
def test_api_checks_pass_against_stub(client, check):
    run_api_check(client, check)


def test_run_api_check_reports_first_mismatch(client):
    check = ApiCheck(name="bad", method="GET", path="/posts/1", fields={"userId": 7})
    with pytest.raises(AssertionFailed, match="userId"):
        run_api_check(client, check)


def test_non_json_body_fails():
    response = mock.Mock()
    response.json.side_effect = ValueError("no json")
    response.text = "<html>"
    response.request.method = "GET"
    response.request.url = "http://example.test/"
    response.status_code = 200
    with pytest.raises(AssertionFailed, match="not JSON"):
        ApiResponse(response).json()


def test_client_joins_urls_and_sets_default_headers():
    client = ApiClient("http://example.test/", headers={"Accept": "application/json"})
    assert client.url("/posts/1") == "http://example.test/posts/1"
    assert client.url("posts") == "http://example.test/posts"
    assert client.session.headers["Accept"] == "application/json"


def test_bool_does_not_match_int(client):
    response = client.get("/posts/1")
    with pytest.raises(AssertionFailed, match="userId is 1, expected True"):
        response.assert_field("userId", True)


def test_int_does_not_match_bool():
    response = mock.Mock()
    response.json.return_value = {"done": False, "count": 0}
    response.request.method = "GET"
    response.request.url = "http://example.test/todos/1"
    response.status_code = 200
    with pytest.raises(AssertionFailed, match="count is 0, expected False"):
        ApiResponse(response).assert_field("count", False)
    ApiResponse(response).assert_field("done", False)
