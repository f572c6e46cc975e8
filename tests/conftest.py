import json

import azure.functions as func
import pytest

from papergen.config import GenerateConfig


@pytest.fixture
def config():
    return GenerateConfig(api_key="test-key")


@pytest.fixture
def blueprint():
    return {
        "board": "CBSE",
        "class": "10",
        "subject": "Science",
        "topic": "Light",
        "difficulty": "Medium",
        "language": "English",
        "mcq": 2,
        "short": 1,
        "long": 1,
    }


@pytest.fixture
def paper():
    return {
        "metadata": {
            "board": "CBSE",
            "class": "10",
            "subject": "Science",
            "topic": "Light",
            "difficulty": "Medium",
            "language": "English",
            "time": 60,
            "totalMarks": 10,
        },
        "sections": [
            {
                "title": "Section A: Multiple Choice Questions",
                "marks": 2,
                "questions": [
                    {"q_num": 1, "question": "Speed of light?", "options": ["A", "B", "C", "D"], "answer": "A", "marks": 1},
                    {"q_num": 2, "question": "Unit of power of lens?", "options": ["A", "B", "C", "D"], "answer": "B", "marks": 1},
                ],
            },
            {
                "title": "Section B: Short Answer Questions",
                "marks": 3,
                "questions": [
                    {"q_num": 3, "question": "Define refraction.", "answer": "Bending of light.", "marks": 3},
                ],
            },
            {
                "title": "Section C: Long Answer Questions",
                "marks": 5,
                "questions": [
                    {"q_num": 4, "question": "Describe image formation by a convex lens.", "answer": "...", "marks": 5},
                ],
            },
        ],
    }


def _make_request(method="POST", body=None, raw=None):
    if raw is None:
        raw = json.dumps(body).encode("utf-8") if body is not None else b""
    return func.HttpRequest(
        method=method,
        url="http://localhost/api/generate",
        headers={"Content-Type": "application/json"},
        body=raw,
    )


def _make_completion(content):
    return {
        "id": "gen-1",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


@pytest.fixture
def mock_post(mocker):
    """Patch the single outbound call; tests set status and JSON on the result."""
    response = mocker.MagicMock()
    response.status_code = 200
    response.text = ""
    post = mocker.patch("papergen.openrouter.requests.post", return_value=response)
    return post


@pytest.fixture
def make_request():
    return _make_request


@pytest.fixture
def make_completion():
    return _make_completion
