"""Shared constants and a recording HTTP transport for the test suite."""

import json
from typing import List

import httpx

API_ROOT = "https://rest.nexmo.test"
API_KEY = "key123"
API_SECRET = "secret456789"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, status_code: int = 200, payload=None):
        self.requests: List[httpx.Request] = []
        self.status_code = status_code
        self.payload = payload if payload is not None else {}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.payload, (bytes, str)):
            return httpx.Response(self.status_code, content=self.payload)
        return httpx.Response(self.status_code, content=json.dumps(self.payload))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]
