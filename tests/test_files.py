import json
import os
import re
from pathlib import Path

from fastapi.testclient import TestClient

from crud_demos_api.app.core.config import Settings
from crud_demos_api.app.main import create_app


def upload(client, name="report.txt", content=b"hello", mime="text/plain", description=None):
    data = {"description": description} if description is not None else None
    res = client.post("/files", files={"file": (name, content, mime)}, data=data)
    assert res.status_code == 201, res.text
    return res.json()


def test_upload_stores_payload_and_metadata(client, upload_dir):
    record = upload(client, description="quarterly")
    assert record["id"] == 1
    assert record["originalName"] == "report.txt"
    assert record["mimeType"] == "text/plain"
    assert record["size"] == 5
    assert record["description"] == "quarterly"
    assert re.fullmatch(r"\d+-\d+\.txt", record["fileName"])
    assert Path(record["path"]) == upload_dir / record["fileName"]
    assert Path(record["path"]).read_bytes() == b"hello"


def test_generated_names_are_unique(client):
    first = upload(client)
    second = upload(client)
    assert first["fileName"] != second["fileName"]


def test_extension_is_kept_and_may_be_empty(client):
    assert upload(client, name="archive.tar.gz")["fileName"].endswith(".gz")
    assert "." not in upload(client, name="README")["fileName"]


def test_list_and_get(client):
    record = upload(client)
    assert client.get("/files").json() == [record]
    assert client.get(f"/files/{record['id']}").json() == record


def test_download_content(client):
    record = upload(client, content=b"\x00\x01binary", mime="application/octet-stream")
    res = client.get(f"/files/{record['id']}/content")
    assert res.status_code == 200
    assert res.content == b"\x00\x01binary"
    assert res.headers["content-type"] == "application/octet-stream"


def test_patch_updates_metadata(client):
    record = upload(client, description="old")
    res = client.patch(f"/files/{record['id']}", json={"description": "new"})
    assert res.status_code == 200
    updated = res.json()
    assert updated["description"] == "new"
    assert updated["originalName"] == "report.txt"
    assert updated["updatedAt"] is not None


def test_delete_removes_record_and_file(client):
    record = upload(client)
    res = client.delete(f"/files/{record['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == record["id"]
    assert not os.path.exists(record["path"])
    res = client.get(f"/files/{record['id']}")
    assert res.status_code == 404
    assert res.json()["detail"] == f"ファイルID {record['id']} が見つかりません"


def test_missing_file_ids(client):
    assert client.get("/files/3").status_code == 404
    assert client.get("/files/3/content").status_code == 404
    assert client.patch("/files/3", json={"description": "x"}).status_code == 404
    assert client.delete("/files/3").status_code == 404


def test_delete_with_payload_missing_on_disk_is_server_error(app):
    client = TestClient(app, raise_server_exceptions=False)
    record = upload(client)
    os.remove(record["path"])
    assert client.delete(f"/files/{record['id']}").status_code == 500
    # The record is only dropped after the payload was removed.
    assert client.get(f"/files/{record['id']}").status_code == 200


def test_no_metadata_snapshot_by_default(client, upload_dir):
    record = upload(client)
    client.patch(f"/files/{record['id']}", json={"description": "x"})
    assert not (upload_dir / "metadata.json").exists()


def test_metadata_snapshot_follows_repository(upload_dir):
    client = TestClient(
        create_app(Settings(upload_dir=str(upload_dir), files_metadata_snapshot=True))
    )
    snapshot = upload_dir / "metadata.json"

    first = upload(client, name="a.txt")
    second = upload(client, name="b.txt")
    assert [f["id"] for f in json.loads(snapshot.read_text(encoding="utf-8"))] == [1, 2]

    client.patch(f"/files/{first['id']}", json={"description": "edited"})
    entries = json.loads(snapshot.read_text(encoding="utf-8"))
    assert entries[0]["description"] == "edited"

    client.delete(f"/files/{second['id']}")
    entries = json.loads(snapshot.read_text(encoding="utf-8"))
    assert [f["id"] for f in entries] == [1]
    assert entries == client.get("/files").json()
