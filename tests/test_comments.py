def add_comment(client, post_id, content):
    res = client.post(f"/posts/{post_id}/comments", json={"content": content, "author": "hanako"})
    assert res.status_code == 201, res.text
    return res.json()


def test_comment_takes_post_id_from_path(client):
    comment = add_comment(client, 3, "hi")
    assert comment["postId"] == 3
    assert comment["content"] == "hi"
    assert comment["author"] == "hanako"
    assert comment["id"] == 1


def test_post_need_not_exist(client):
    assert client.get("/posts/77").status_code == 404
    add_comment(client, 77, "orphan")
    assert len(client.get("/posts/77/comments").json()) == 1


def test_list_is_scoped_to_post(client):
    add_comment(client, 1, "a")
    add_comment(client, 2, "b")
    add_comment(client, 1, "c")
    res = client.get("/posts/1/comments")
    assert [c["content"] for c in res.json()] == ["a", "c"]
    assert all(c["postId"] == 1 for c in res.json())
    assert client.get("/posts/3/comments").json() == []


def test_get_requires_matching_post(client):
    comment = add_comment(client, 1, "a")
    assert client.get(f"/posts/1/comments/{comment['id']}").json() == comment
    res = client.get(f"/posts/2/comments/{comment['id']}")
    assert res.status_code == 404
    assert res.json()["detail"] == f"コメントID {comment['id']} が見つかりません"


def test_delete_requires_matching_post(client):
    comment = add_comment(client, 1, "a")
    assert client.delete(f"/posts/2/comments/{comment['id']}").status_code == 404
    assert client.delete(f"/posts/1/comments/{comment['id']}").status_code == 204
    assert client.get(f"/posts/1/comments/{comment['id']}").status_code == 404


def test_deleting_post_keeps_comments(client):
    client.post("/posts", json={"title": "p"})
    add_comment(client, 1, "a")
    client.delete("/posts/1")
    assert len(client.get("/posts/1/comments").json()) == 1
