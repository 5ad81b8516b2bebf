import random

from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.crud.forum_reply import forum_reply as crud_forum_reply
from app.models.forum_reply import ForumReply
from app.models.forum_thread import ForumThread
from tests.helpers.asserts import assert_error
from tests.helpers.builders import accept, create_reply, create_thread


def _accept_ok(client, headers, reply_id):
    response = accept(client, headers, reply_id)
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    return data["reply"]["isAccepted"], data["threadResolved"]


def _stored_state(db_session: Session, thread_id: int):
    db_session.expire_all()
    thread = db_session.get(ForumThread, thread_id)
    accepted = [
        r.id for r in db_session.query(ForumReply).filter_by(thread_id=thread_id, is_accepted_answer=True)
    ]
    return thread.is_resolved, accepted


def test_accept_switch_and_unaccept_scenario(client: TestClient, student, faculty, course, auth_headers, db_session: Session):
    owner = auth_headers(student)
    thread_id = create_thread(client, owner, course.id)
    r1 = create_reply(client, auth_headers(faculty), thread_id, body="R1")
    r2 = create_reply(client, auth_headers(faculty), thread_id, body="R2")

    assert _accept_ok(client, owner, r1) == (True, True)
    assert _stored_state(db_session, thread_id) == (True, [r1])

    assert _accept_ok(client, owner, r2) == (True, True)
    assert _stored_state(db_session, thread_id) == (True, [r2])

    assert _accept_ok(client, owner, r2) == (False, False)
    assert _stored_state(db_session, thread_id) == (False, [])


def test_accepting_twice_restores_original_state(client: TestClient, student, faculty, course, auth_headers, db_session: Session):
    owner = auth_headers(student)
    thread_id = create_thread(client, owner, course.id)
    r1 = create_reply(client, auth_headers(faculty), thread_id)
    r2 = create_reply(client, auth_headers(faculty), thread_id)
    _accept_ok(client, owner, r1)
    before = _stored_state(db_session, thread_id)

    _accept_ok(client, owner, r1)
    _accept_ok(client, owner, r1)
    assert _stored_state(db_session, thread_id) == before

    _accept_ok(client, owner, r2)
    _accept_ok(client, owner, r2)
    # r2 toggled on then off; r1 was cleared when r2 was accepted
    assert _stored_state(db_session, thread_id) == (False, [])


def test_resolution_tracks_accepted_replies_over_any_sequence(client: TestClient, student, faculty, course, auth_headers, db_session: Session):
    owner = auth_headers(student)
    thread_id = create_thread(client, owner, course.id)
    replies = [create_reply(client, auth_headers(faculty), thread_id, body=f"reply {i}") for i in range(4)]

    rng = random.Random(1234)
    for _ in range(25):
        is_accepted, thread_resolved = _accept_ok(client, owner, rng.choice(replies))
        resolved, accepted = _stored_state(db_session, thread_id)
        assert len(accepted) <= 1
        assert resolved == (len(accepted) > 0)
        assert thread_resolved == resolved
        if is_accepted:
            assert len(accepted) == 1


def test_only_thread_creator_can_accept(client: TestClient, student, faculty, course, auth_headers, db_session: Session):
    thread_id = create_thread(client, auth_headers(student), course.id)
    reply_id = create_reply(client, auth_headers(faculty), thread_id)

    response = accept(client, auth_headers(faculty), reply_id)

    assert_error(response, 403, "FORBIDDEN")
    assert _stored_state(db_session, thread_id) == (False, [])


def test_other_threads_are_untouched(client: TestClient, student, faculty, course, auth_headers, db_session: Session):
    owner = auth_headers(student)
    first_thread = create_thread(client, owner, course.id, title="First")
    second_thread = create_thread(client, owner, course.id, title="Second")
    first_reply = create_reply(client, auth_headers(faculty), first_thread)
    second_reply = create_reply(client, auth_headers(faculty), second_thread)

    _accept_ok(client, owner, first_reply)
    _accept_ok(client, owner, second_reply)

    assert _stored_state(db_session, first_thread) == (True, [first_reply])
    assert _stored_state(db_session, second_thread) == (True, [second_reply])


def test_failure_keeps_previous_acceptance(client: TestClient, student, faculty, course, auth_headers, db_session: Session, monkeypatch):
    owner = auth_headers(student)
    thread_id = create_thread(client, owner, course.id)
    r1 = create_reply(client, auth_headers(faculty), thread_id, body="R1")
    r2 = create_reply(client, auth_headers(faculty), thread_id, body="R2")
    _accept_ok(client, owner, r1)

    def _fail(*args, **kwargs):
        raise SQLAlchemyError("connection reset")

    monkeypatch.setattr(crud_forum_reply, "has_accepted", _fail)

    response = accept(client, owner, r2)

    body = assert_error(response, 500, "INTERNAL_SERVER_ERROR")
    assert body["error"]["message"] == "Internal server error updating answer status."
    assert _stored_state(db_session, thread_id) == (True, [r1])
