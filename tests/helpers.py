import json
from typing import List
from urllib.parse import parse_qs

import httpx


ENDPOINT = "https://scarf.example.com/events"


class RecordingHandler:
    """
    httpx.MockTransport handler that records requests and answers with a fixed status.
    """

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text="ignored body")

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_query(self) -> dict:
        query = parse_qs(self.last.url.query.decode("ascii"), keep_blank_values=True)
        return {key: values[-1] for key, values in query.items()}

    def last_json_param(self, name: str):
        return json.loads(self.last_query()[name])
