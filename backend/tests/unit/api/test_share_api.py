"""Unit tests for the share routers (notemark/api/share.py)."""


def test_get_shared_note_json(client):
    resp = client.get("/api/share/share-abc")

    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Meeting notes"
    assert data["content"].startswith("# Agenda")
    assert [block["kind"] for block in data["blocks"]] == ["heading", "list", "line_break", "paragraph"]


def test_get_shared_note_missing(client):
    resp = client.get("/api/share/does-not-exist")

    assert resp.status_code == 404
    assert resp.json() == {"detail": "Note not found"}


def test_share_page(client):
    resp = client.get("/share/share-abc")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "<title>Meeting notes</title>" in resp.text
    assert '<ul class="my-2 list-disc list-inside"><li>one</li><li>two</li></ul>' in resp.text


def test_share_page_untitled(client):
    resp = client.get("/share/share-blog")
    assert "<title>Untitled</title>" in resp.text


def test_share_page_missing(client):
    resp = client.get("/share/does-not-exist")

    assert resp.status_code == 404
    assert "Note Not Found" in resp.text
