"""Tests for the Miro REST client using httpx.MockTransport."""

import json
import httpx
import pytest

from learning_hour.exceptions import ConfigurationError, UpstreamError
from learning_hour.miro.client import MiroClient, escape_html
from learning_hour.models import CodeImage


class Recorder:
    """Transport handler that records requests and replies with canned JSON."""

    def __init__(self, status=200, body=None):
        self.status = status
        self.body = body if body is not None else {"id": "item-1"}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


def _client(recorder, token="miro-token") -> MiroClient:
    return MiroClient(token, transport=httpx.MockTransport(recorder))


def test_missing_token_fails_on_first_use():
    client = MiroClient(None)
    with pytest.raises(ConfigurationError, match="MIRO_ACCESS_TOKEN"):
        client.list_boards()


def test_create_board():
    recorder = Recorder(body={"id": "b1", "viewLink": "https://miro.com/app/board/b1/"})

    with _client(recorder) as client:
        board = client.create_board("Learning Hour: TDD", "Practice red-green-refactor")

    assert board["id"] == "b1"
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/v2/boards"
    assert recorder.last.headers["Authorization"] == "Bearer miro-token"
    body = recorder.last_json()
    assert body["name"] == "Learning Hour: TDD"
    assert body["description"] == "Practice red-green-refactor"


def test_sticky_note_endpoint_and_style():
    recorder = Recorder()

    with _client(recorder) as client:
        client.create_sticky_note("b1", "Tests first", 10, 20, color="light_blue")

    assert recorder.last.url.path == "/v2/boards/b1/sticky_notes"
    body = recorder.last_json()
    assert body["data"]["content"] == "Tests first"
    assert body["style"]["fillColor"] == "light_blue"
    assert body["position"] == {"x": 10, "y": 20}


def test_frame_and_text_endpoints():
    recorder = Recorder()

    with _client(recorder) as client:
        client.create_frame("b1", "Objectives", 200, 150, 400, 300)
        assert recorder.last.url.path == "/v2/boards/b1/frames"
        assert recorder.last_json()["data"]["title"] == "Objectives"
        assert recorder.last_json()["geometry"] == {"width": 400, "height": 300}

        client.create_text("b1", "<strong>Hi</strong>", 0, 0, width=300)
        assert recorder.last.url.path == "/v2/boards/b1/texts"
        assert recorder.last_json()["geometry"] == {"width": 300}


def test_code_block_escapes_html():
    recorder = Recorder()

    with _client(recorder) as client:
        client.create_code_block("b1", "List<T> a = x && 'y';", 0, 0)

    assert recorder.last.url.path == "/v2/boards/b1/shapes"
    body = recorder.last_json()
    assert body["data"]["content"] == "<pre>List&lt;T&gt; a = x &amp;&amp; &#39;y&#39;;</pre>"
    assert body["style"]["fillColor"] == "#1e1e1e"


def test_create_image_uploads_multipart():
    recorder = Recorder()
    image = CodeImage(data=b"png-bytes", width=640, height=320)

    with _client(recorder) as client:
        client.create_image("b1", image, 5, 6, title="Before")

    request = recorder.last
    assert request.url.path == "/v2/boards/b1/images"
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b"png-bytes" in request.content
    assert b'"position"' in request.content


def test_list_and_get_boards():
    recorder = Recorder(body={"data": [{"id": "b1", "name": "One"}], "viewLink": "https://miro.com/app/board/b1/"})

    with _client(recorder) as client:
        boards = client.list_boards(limit=5)
        assert boards == [{"id": "b1", "name": "One"}]
        assert recorder.last.url.params["limit"] == "5"

        assert client.get_board_view_link("b1") == "https://miro.com/app/board/b1/"
        assert recorder.last.url.path == "/v2/boards/b1"


def test_http_error_becomes_upstream_error():
    with _client(Recorder(status=500, body={"message": "boom"})) as client:
        with pytest.raises(UpstreamError, match="Failed to create board: 500"):
            client.create_board("x")


def test_validate_token():
    with _client(Recorder(body={"data": []})) as client:
        assert client.validate_token() is True
    with _client(Recorder(status=401, body={"message": "unauthorized"})) as client:
        assert client.validate_token() is False


def test_authorization_url():
    url = MiroClient.get_authorization_url("client-123", "https://app.example.com/cb", "xyz")

    assert url == (
        "https://miro.com/oauth/authorize?response_type=code&client_id=client-123"
        "&redirect_uri=https%3A%2F%2Fapp.example.com%2Fcb&state=xyz"
    )


def test_authorization_url_without_state():
    assert "state=" not in MiroClient.get_authorization_url("c", "https://x.io/cb")


def test_escape_html():
    assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
