"""
Tests for CrudDemosClient against a stubbed requests session.
"""

import json
from unittest.mock import MagicMock

import requests

from crud_demos_client import CrudDemosClient


def make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://api.test"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    return response


def make_client(response, **kwargs):
    session = MagicMock()
    session.request.return_value = response
    return CrudDemosClient(base_url="http://api.test/", session=session, **kwargs), session


def test_get_post_success():
    client, session = make_client(make_response(200, {"id": 1, "title": "A"}))
    data, error = client.get_post(1)
    assert data == {"id": 1, "title": "A"}
    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://api.test/posts/1"


def test_not_found_becomes_error_tuple():
    client, _ = make_client(make_response(404, {"detail": "メモID: 3 が見つかりません"}))
    data, error = client.get_memo(3)
    assert data is None
    assert error == {"status_code": 404, "message": "メモID: 3 が見つかりません"}


def test_non_json_error_body_uses_text():
    client, _ = make_client(make_response(500, text="Internal Server Error"))
    _, error = client.delete_file(1)
    assert error == {"status_code": 500, "message": "Internal Server Error"}


def test_network_failure_does_not_raise():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("refused")
    client = CrudDemosClient(base_url="http://api.test", session=session)
    items, error = client.list_posts()
    assert items == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_empty_body_delete_reports_success():
    client, session = make_client(make_response(204))
    ok, error = client.delete_comment(2, 5)
    assert ok is True
    assert error is None
    assert session.request.call_args.kwargs["url"] == "http://api.test/posts/2/comments/5"


def test_prefix_and_api_key():
    client, session = make_client(make_response(200, []), prefix="/api/v1/", api_key="secret")
    client.list_tasks()
    kwargs = session.request.call_args.kwargs
    assert kwargs["url"] == "http://api.test/api/v1/todo/tasks"
    assert kwargs["headers"] == {"Authorization": "Bearer secret"}


def test_upload_sends_multipart():
    client, session = make_client(make_response(201, {"id": 1}))
    data, _ = client.upload_file("a.txt", b"hi", mime_type="text/plain", description="d")
    assert data == {"id": 1}
    kwargs = session.request.call_args.kwargs
    assert kwargs["files"] == {"file": ("a.txt", b"hi", "text/plain")}
    assert kwargs["data"] == {"description": "d"}


def test_complete_task_uses_patch():
    client, session = make_client(make_response(200, {"id": 1, "isCompleted": True}))
    data, _ = client.complete_task(1)
    assert data["isCompleted"] is True
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PATCH"
    assert kwargs["url"] == "http://api.test/todo/tasks/1/complete"
