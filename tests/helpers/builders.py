"""Build quizzes and forum threads through the public API."""
from typing import Dict, List, Optional
from fastapi.testclient import TestClient

from tests.helpers.asserts import api_call


def create_quiz(client: TestClient, headers: Dict[str, str], course_id: int, title: str = "Week 1 Quiz") -> int:
    response = api_call(client, "POST", f"/courses/{course_id}/quizzes", headers=headers, json={"title": title})
    return response.json()["data"]["id"]


def add_question(
    client: TestClient,
    headers: Dict[str, str],
    quiz_id: int,
    question_type: str,
    options: Optional[List[Dict]] = None,
    points: int = 1,
    order_index: int = 0,
    question_text: str = "Question?",
) -> Dict:
    """Add a question and return it with ``correct_ids`` and ``option_ids`` for convenience."""
    payload = {
        "question_text": question_text,
        "question_type": question_type,
        "points": points,
        "order_index": order_index,
        "options": options or [],
    }
    data = api_call(client, "POST", f"/quizzes/{quiz_id}/questions", headers=headers, json=payload).json()["data"]
    data["option_ids"] = [o["id"] for o in data["options"]]
    data["correct_ids"] = [o["id"] for o in data["options"] if o["is_correct"]]
    return data


def submit(client: TestClient, headers: Dict[str, str], quiz_id: int, answers: List[Dict]):
    return client.post(f"/quizzes/{quiz_id}/submit", headers=headers, json={"answers": answers})


def create_thread(client: TestClient, headers: Dict[str, str], course_id: int, title: str = "How does recursion work?") -> int:
    response = api_call(client, "POST", f"/courses/{course_id}/forum", headers=headers, json={"title": title, "body": "Stuck on lab 3."})
    return response.json()["data"]["id"]


def create_reply(client: TestClient, headers: Dict[str, str], thread_id: int, body: str = "Think of the base case first.") -> int:
    response = api_call(client, "POST", f"/forum/threads/{thread_id}/replies", headers=headers, json={"body": body})
    return response.json()["data"]["id"]


def accept(client: TestClient, headers: Dict[str, str], reply_id: int):
    return client.put(f"/forum/replies/{reply_id}/accept", headers=headers)
