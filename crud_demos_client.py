"""CRUD Demos API client.

This module defines a small client wrapper around the REST surface of
``crud_demos_api``.  The client uses the ``requests`` library
internally and exposes one method per resource operation:

* posts -- :meth:`list_posts`, :meth:`get_post`, :meth:`create_post`,
  :meth:`update_post`, :meth:`delete_post`
* comments -- :meth:`list_comments`, :meth:`get_comment`,
  :meth:`create_comment`, :meth:`delete_comment`
* memos, tasks, files, users and profiles in the same manner.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message`` (the ``detail`` field of the API's
error body when available).  Network failures never raise.

Paths are taken from :attr:`CrudDemosClient.PATHS`; pass ``prefix`` if
the server mounts its routers under ``API_PREFIX``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CrudDemosClient:
    """Client for interacting with the CRUD demos API."""

    PATHS: Dict[str, str] = {
        "posts": "/posts",
        "post": "/posts/{id}",
        "comments": "/posts/{post_id}/comments",
        "comment": "/posts/{post_id}/comments/{id}",
        "memos": "/memos",
        "memo": "/memos/{id}",
        "tasks": "/todo/tasks",
        "task": "/todo/tasks/{id}",
        "task_complete": "/todo/tasks/{id}/complete",
        "files": "/files",
        "file": "/files/{id}",
        "users": "/users",
        "user": "/users/{id}",
        "profiles": "/profiles",
        "profile_by_user": "/profiles/user/{user_id}",
    }

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            prefix: Optional path prefix the routers are mounted under.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = prefix.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _path(self, name: str, **params: Any) -> str:
        return self.prefix + self.PATHS[name].format(**params)

    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        data: Dict[str, Any] | None = None,
        files: Dict[str, Any] | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/memos``).
            json_body: JSON body to send with the request.
            data: Form fields for multipart requests.
            files: Files for multipart requests.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``.  On failure, ``data`` is ``None`` and ``error`` is
            a dictionary with keys ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                data=data,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _deleted(self, path: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", path)
        return error is None, error

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------
    def list_posts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(self._path("posts"))

    def get_post(self, post_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._path("post", id=post_id))

    def create_post(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._path("posts"), json_body=payload)

    def update_post(self, post_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", self._path("post", id=post_id), json_body=payload)

    def delete_post(self, post_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a post.  The API returns the deleted post."""
        return self._request("DELETE", self._path("post", id=post_id))

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------
    def list_comments(self, post_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(self._path("comments", post_id=post_id))

    def get_comment(self, post_id: int, comment_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._path("comment", post_id=post_id, id=comment_id))

    def create_comment(self, post_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._path("comments", post_id=post_id), json_body=payload)

    def delete_comment(self, post_id: int, comment_id: int) -> Tuple[bool, Optional[Error]]:
        return self._deleted(self._path("comment", post_id=post_id, id=comment_id))

    # ------------------------------------------------------------------
    # Memos
    # ------------------------------------------------------------------
    def list_memos(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(self._path("memos"))

    def get_memo(self, memo_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._path("memo", id=memo_id))

    def create_memo(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._path("memos"), json_body=payload)

    def update_memo(self, memo_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", self._path("memo", id=memo_id), json_body=payload)

    def delete_memo(self, memo_id: int) -> Tuple[bool, Optional[Error]]:
        return self._deleted(self._path("memo", id=memo_id))

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(self._path("tasks"))

    def create_task(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._path("tasks"), json_body=payload)

    def complete_task(self, task_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", self._path("task_complete", id=task_id))

    def delete_task(self, task_id: int) -> Tuple[bool, Optional[Error]]:
        return self._deleted(self._path("task", id=task_id))

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------
    def upload_file(
        self,
        filename: str,
        content: bytes,
        *,
        mime_type: str = "application/octet-stream",
        description: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Upload ``content`` as a multipart ``file`` part."""
        form = {"description": description} if description is not None else None
        return self._request(
            "POST",
            self._path("files"),
            data=form,
            files={"file": (filename, content, mime_type)},
        )

    def list_files(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(self._path("files"))

    def get_file(self, file_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._path("file", id=file_id))

    def update_file(self, file_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", self._path("file", id=file_id), json_body=payload)

    def delete_file(self, file_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", self._path("file", id=file_id))

    # ------------------------------------------------------------------
    # Users and profiles
    # ------------------------------------------------------------------
    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._path("users"), json_body=payload)

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(self._path("users"))

    def get_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._path("user", id=user_id))

    def create_profile(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._path("profiles"), json_body=payload)

    def get_profile_by_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._path("profile_by_user", user_id=user_id))
