"""
HTTP assertion client for JSON APIs.

ApiClient wraps a requests.Session and returns ApiResponse objects whose
assert_* methods raise AssertionFailed with the request, the field and the
values involved.
"""

import logging
from dataclasses import dataclass, field as dc_field
from typing import Any, Dict, Optional

import requests

from .errors import AssertionFailed

logger = logging.getLogger(__name__)

_MISSING = object()


def _lookup(document, path):
    """Follow a dotted path through dicts and lists ("tags.0.name")."""
    current = document
    for part in path.split("."):
        if isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        elif isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return _MISSING
    return current


class ApiResponse:
    def __init__(self, response):
        self.response = response
        self._json = _MISSING

    def __repr__(self):
        return f"<ApiResponse {self.describe()}>"

    @property
    def status_code(self):
        return self.response.status_code

    def describe(self):
        request = self.response.request
        return f"{request.method} {request.url} -> {self.response.status_code}"

    def json(self):
        if self._json is _MISSING:
            try:
                self._json = self.response.json()
            except ValueError as e:
                raise AssertionFailed(
                    f"{self.describe()}: body is not JSON: {self.response.text[:200]!r}"
                ) from e
        return self._json

    def field(self, path):
        value = _lookup(self.json(), path)
        if value is _MISSING:
            raise AssertionFailed(f"{self.describe()}: field {path!r} missing")
        return value

    def assert_status(self, expected):
        if self.response.status_code != expected:
            raise AssertionFailed(
                f"{self.describe()}: expected status {expected}, got {self.response.status_code}"
            )
        return self

    def assert_field(self, path, expected):
        actual = self.field(path)
        # 1 == True in Python, the JSON types must agree as well
        if actual != expected or isinstance(actual, bool) != isinstance(expected, bool):
            raise AssertionFailed(f"{self.describe()}: {path} is {actual!r}, expected {expected!r}")
        return self

    def assert_field_present(self, path):
        self.field(path)
        return self


class ApiClient:
    def __init__(self, base_url, timeout=10, session=None, headers=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if headers:
            self.session.headers.update(headers)

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method, path, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        url = self.url(path)
        logger.debug("%s %s", method, url)
        response = self.session.request(method, url, **kwargs)
        logger.info("%s %s -> %s", method, url, response.status_code)
        return ApiResponse(response)

    def get(self, path, **kwargs):
        return self.request("GET", path, **kwargs)

    def post(self, path, json=None, headers=None, **kwargs):
        return self.request("POST", path, json=json, headers=headers, **kwargs)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@dataclass(frozen=True)
class ApiCheck:
    name: str
    method: str
    path: str
    status: int = 200
    body: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, str]] = None
    fields: Dict[str, Any] = dc_field(default_factory=dict)
    present: tuple = ()


API_CHECKS = [
    ApiCheck(
        name="get_post",
        method="GET",
        path="/posts/1",
        status=200,
        fields={"userId": 1, "id": 1},
        present=("title", "body"),
    ),
    ApiCheck(
        name="create_post",
        method="POST",
        path="/posts",
        status=201,
        body={"title": "foo", "body": "bar", "userId": 1},
        headers={"Content-type": "application/json; charset=UTF-8"},
        fields={"title": "foo", "body": "bar", "userId": 1},
        present=("id",),
    ),
]


def run_api_check(client, check):
    response = client.request(check.method, check.path, json=check.body, headers=check.headers)
    response.assert_status(check.status)
    for path, expected in check.fields.items():
        response.assert_field(path, expected)
    for path in check.present:
        response.assert_field_present(path)
    return response
