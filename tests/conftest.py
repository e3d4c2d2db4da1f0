import pytest
import requests

from ripe_country_stat.ripestat import RipeStatClient


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body_is_json=True):
        self.payload = payload
        self.status_code = status_code
        self.body_is_json = body_is_json

    def json(self):
        if not self.body_is_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class FakeSession:
    """
    Stands in for requests.Session. Responses are keyed by
    (endpoint, resource); every call is recorded in ``calls``.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []
        self.closed = False

    def get(self, url, params=None, headers=None, timeout=None):
        endpoint = url.split("/")[-2]
        self.calls.append({
            "url": url,
            "endpoint": endpoint,
            "params": dict(params or {}),
            "headers": headers,
            "timeout": timeout,
        })
        response = self.responses[(endpoint, str(params["resource"]))]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, FakeResponse):
            return response
        return FakeResponse(response)

    def close(self):
        self.closed = True

    def endpoints_called(self, endpoint):
        return [c["params"]["resource"] for c in self.calls if c["endpoint"] == endpoint]


class FakeNameResolver:
    def __init__(self, names, fail_on=None):
        self.names = names
        self.fail_on = fail_on or {}
        self.resolved = []

    def resolve(self, asn):
        self.resolved.append(asn)
        if asn in self.fail_on:
            raise self.fail_on[asn]
        return self.names[asn]


def country_payload(routed="", non_routed="", messages=None, cc="TR"):
    return {
        "messages": messages or [],
        "data": {
            "countries": [{"resource": cc, "routed": routed, "non_routed": non_routed}],
        },
        "status": "ok",
    }


def prefixes_payload(v4, v6, messages=None):
    return {
        "messages": messages or [],
        "data": {"counts": {"v4": {"originating": v4}, "v6": {"originating": v6}}},
        "status": "ok",
    }


@pytest.fixture
def make_client():
    def _make(responses, timeout=10):
        session = FakeSession(responses)
        return RipeStatClient(timeout=timeout, session=session), session
    return _make
