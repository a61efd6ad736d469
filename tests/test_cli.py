import json

import httpx

from feed_assembler.cli import main

BASE_URL = "http://feed.test/api/slow/"

ROUTES = {
    "/api/slow/posts": [
        {"id": 1, "authorId": 10, "content": "first post", "published": 1, "likedByMe": False},
        {"id": 2, "authorId": 20, "content": "second post", "published": 2, "likedByMe": False},
    ],
    "/api/slow/authors/10": {"id": 10, "name": "Ann", "avatar": "ann.jpg"},
    "/api/slow/authors/20": {"id": 20, "name": "Bo", "avatar": "bo.jpg"},
    "/api/slow/posts/1/comments": [
        {"id": 100, "postId": 1, "authorId": 20, "content": "hi Ann", "published": 3, "likedByMe": False}
    ],
    "/api/slow/posts/2/comments": [],
}


class RecordingTransport(httpx.MockTransport):
    def __init__(self, failing=()):
        self.paths: list[str] = []
        self._failing = set(failing)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.paths.append(path)
        if path in self._failing:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json=ROUTES[path])


def test_prints_feed_in_post_order(capsys):
    transport = RecordingTransport()

    code = main(["--base-url", BASE_URL], transport=transport)

    assert code == 0
    out = capsys.readouterr().out
    assert out.index("Author: Ann") < out.index("Author: Bo")
    assert "Content: first post" in out
    assert "hi Ann" in out
    assert len(transport.paths) == 5


def test_json_output(capsys):
    code = main(["--base-url", BASE_URL, "--json"], transport=RecordingTransport())

    assert code == 0
    records = json.loads(capsys.readouterr().out)
    assert [r["author"]["name"] for r in records] == ["Ann", "Bo"]
    assert records[0]["post"]["authorId"] == 10


def test_failure_prints_nothing(capsys):
    transport = RecordingTransport(failing=["/api/slow/authors/20"])

    code = main(["--base-url", BASE_URL], transport=transport)

    assert code == 1
    assert capsys.readouterr().out == ""


def test_base_url_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("FEED_BASE_URL", BASE_URL)
    transport = RecordingTransport()

    code = main([], transport=transport)

    assert code == 0
    assert transport.paths[0] == "/api/slow/posts"
    assert "Author: Ann" in capsys.readouterr().out


def test_undecodable_body_exits_cleanly(capsys):
    def handler(request):
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip")

    code = main(["--base-url", BASE_URL], transport=httpx.MockTransport(handler))

    assert code == 1
    assert capsys.readouterr().out == ""
