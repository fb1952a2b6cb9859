"""Unit tests for the preview API router (notemark/api/preview.py)."""


def test_preview_renders_blocks(client):
    resp = client.post("/api/preview/", json={"content": "# Title\n- a\n- b"})

    assert resp.status_code == 200
    data = resp.json()
    assert [block["kind"] for block in data["blocks"]] == ["heading", "list"]
    assert data["blocks"][0]["level"] == 1
    assert data["blocks"][0]["html"] == "Title"
    assert [item["html"] for item in data["blocks"][1]["items"]] == ["a", "b"]
    assert data["html"].startswith('<h1 class="text-2xl font-bold my-2">Title</h1>')


def test_preview_spans_serialized(client):
    data = client.post("/api/preview/", json={"content": "[x](https://x.io)"}).json()

    assert data["blocks"][0]["spans"] == [{"kind": "link", "text": "x", "href": "https://x.io"}]


def test_preview_escapes_by_default(client):
    data = client.post("/api/preview/", json={"content": "<script>"}).json()
    assert data["blocks"][0]["html"] == "&lt;script&gt;"


def test_preview_legacy_mode(client):
    data = client.post("/api/preview/", json={"content": "<u>x</u>", "safe": False}).json()
    assert data["blocks"][0]["html"] == "<u>x</u>"


def test_preview_empty_content(client):
    data = client.post("/api/preview/", json={"content": ""}).json()
    assert data["blocks"] == [{"kind": "line_break", "line": 0}]
    assert data["html"] == "<br />"


def test_preview_requires_content(client):
    assert client.post("/api/preview/", json={}).status_code == 422


def test_format_endpoint(client):
    resp = client.post(
        "/api/preview/format",
        json={"content": "some text", "start": 5, "end": 9, "format": "strikethrough"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"content": "some ~~text~~", "start": 5, "end": 13}


def test_format_endpoint_clears(client):
    resp = client.post("/api/preview/format", json={"content": "**x**", "start": 0, "end": 5})
    assert resp.json() == {"content": "x", "start": 0, "end": 1}


def test_format_endpoint_bad_range(client):
    resp = client.post(
        "/api/preview/format", json={"content": "abc", "start": 0, "end": 9, "format": "bold"}
    )
    assert resp.status_code == 400
