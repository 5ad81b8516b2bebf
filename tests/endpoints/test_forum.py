from fastapi.testclient import TestClient

from tests.helpers.asserts import api_call, assert_error
from tests.helpers.builders import accept, create_reply, create_thread


class TestForumEndpoints:
    def test_create_thread(self, client: TestClient, student, course, auth_headers):
        response = api_call(
            client, "POST", f"/courses/{course.id}/forum", headers=auth_headers(student),
            json={"title": "  Office hours?  ", "body": "When are they?"},
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["title"] == "Office hours?"
        assert data["creator_id"] == student.id
        assert data["course_id"] == course.id
        assert data["is_resolved"] is False

    def test_create_thread_requires_title(self, client: TestClient, student, course, auth_headers):
        response = client.post(f"/courses/{course.id}/forum", headers=auth_headers(student), json={"title": ""})
        assert_error(response, 422, "VALIDATION_ERROR")

    def test_create_thread_unknown_course(self, client: TestClient, student, auth_headers):
        response = client.post("/courses/999999/forum", headers=auth_headers(student), json={"title": "Hello"})
        assert_error(response, 404, "NOT_FOUND")

    def test_list_threads_with_reply_counts(self, client: TestClient, student, faculty, course_factory, auth_headers):
        course = course_factory()
        first = create_thread(client, auth_headers(student), course.id, title="First")
        second = create_thread(client, auth_headers(student), course.id, title="Second")
        create_reply(client, auth_headers(faculty), first)
        create_reply(client, auth_headers(faculty), first)

        response = api_call(client, "GET", f"/courses/{course.id}/forum", headers=auth_headers(faculty))
        threads = {t["id"]: t for t in response.json()["data"]}
        assert set(threads) == {first, second}
        assert threads[first]["reply_count"] == 2
        assert threads[second]["reply_count"] == 0
        assert threads[first]["creator"]["name"] == "Student"

    def test_get_thread_with_replies_in_order(self, client: TestClient, student, faculty, course, auth_headers):
        thread_id = create_thread(client, auth_headers(student), course.id)
        first = create_reply(client, auth_headers(faculty), thread_id, body="first")
        second = create_reply(client, auth_headers(student), thread_id, body="second")

        response = api_call(client, "GET", f"/forum/threads/{thread_id}", headers=auth_headers(student))
        data = response.json()["data"]
        assert data["thread"]["id"] == thread_id
        assert data["thread"]["creator"]["id"] == student.id
        assert [r["id"] for r in data["replies"]] == [first, second]
        assert data["replies"][0]["creator"]["name"] == "Faculty"
        assert all(r["is_accepted_answer"] is False for r in data["replies"])

    def test_get_unknown_thread(self, client: TestClient, student, auth_headers):
        response = client.get("/forum/threads/999999", headers=auth_headers(student))
        assert_error(response, 404, "NOT_FOUND")

    def test_reply_requires_body(self, client: TestClient, student, course, auth_headers):
        thread_id = create_thread(client, auth_headers(student), course.id)
        response = client.post(f"/forum/threads/{thread_id}/replies", headers=auth_headers(student), json={"body": "  "})
        assert_error(response, 422, "VALIDATION_ERROR")

    def test_reply_to_unknown_thread(self, client: TestClient, student, auth_headers):
        response = client.post("/forum/threads/999999/replies", headers=auth_headers(student), json={"body": "hi"})
        assert_error(response, 404, "NOT_FOUND")

    def test_accept_response_shape(self, client: TestClient, student, faculty, course, auth_headers):
        thread_id = create_thread(client, auth_headers(student), course.id)
        reply_id = create_reply(client, auth_headers(faculty), thread_id)

        response = accept(client, auth_headers(student), reply_id)
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Reply marked as accepted answer."
        assert body["data"] == {"reply": {"id": reply_id, "isAccepted": True}, "threadResolved": True}

    def test_accept_unknown_reply(self, client: TestClient, student, auth_headers):
        response = accept(client, auth_headers(student), 999999)
        assert_error(response, 404, "NOT_FOUND")
