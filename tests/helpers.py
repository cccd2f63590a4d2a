import json

import requests

BASE_URL = "http://jira.example.com:8081/"


def make_response(status_code=200, body=None, text=None):
    """Build a real requests.Response carrying the given JSON body."""
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response
