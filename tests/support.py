"""Test doubles shared across test modules."""

from __future__ import annotations

import json

import httpx

API_BASE = "https://dict.test/api/v2/entries/en"

RUN_ENTRY = [
    {
        "word": "run",
        "phonetics": [{"text": "/rʌn/"}],
        "meanings": [
            {"partOfSpeech": "verb", "definitions": [{"definition": "to move fast"}]}
        ],
    }
]


class StubDictionary:
    """Records requests and answers them from a word -> (status, body) table.

    Unknown words get a 404, like the real API.
    """

    def __init__(self, responses: dict | None = None):
        self.responses = responses or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        word = request.url.path.rsplit("/", 1)[-1]
        status, body = self.responses.get(word, (404, {"title": "No Definitions Found"}))
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, content=json.dumps(body).encode("utf-8"),
                              headers={"content-type": "application/json"})
