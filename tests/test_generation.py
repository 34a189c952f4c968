import pytest

from conftest import SAMPLE_TEXT

GENERATION_ROUTES = [
    "/api/generate-flashcards",
    "/api/generate-quiz",
    "/api/generate-summary",
    "/api/generate-exam-questions",
]

FLASHCARDS = {
    "flashcards": [
        {"q": f"Vraag {i}?", "a": f"Antwoord {i}"} for i in range(1, 7)
    ]
}

QUIZ = {
    "quiz": [
        {"q": "Wat produceren mitochondrien?", "opts": ["ATP", "DNA", "RNA", "Eiwit"], "correct": 0},
        {"q": "Wat regelt de celmembraan?", "opts": ["Niets", "Transport", "Deling", "Groei"], "correct": 1},
    ]
}

EXAM = {
    "examQuestions": [
        {"q": "Leg de rol van de celmembraan uit.", "points": 10, "type": "open"},
        {"q": "Vergelijk mitochondrien en chloroplasten.", "points": 12, "type": "open"},
    ]
}

# -----------------------------
# Validation before any external call
# -----------------------------
@pytest.mark.parametrize("route", GENERATION_ROUTES)
@pytest.mark.parametrize("body", [
    {},
    {"text": ""},
    {"text": "te kort"},
    {"text": "   " + "x" * 49 + "   "},
])
def test_short_text_rejected_without_external_call(client, completion, route, body):
    response = client.post(route, json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Text is too short. Please provide at least 50 characters."}
    assert completion.calls == []


@pytest.mark.parametrize("route", GENERATION_ROUTES)
def test_non_string_text_is_client_error(client, completion, route):
    response = client.post(route, json={"text": 12345})

    assert response.status_code == 400
    assert "error" in response.json()
    assert completion.calls == []


@pytest.mark.parametrize("route", GENERATION_ROUTES)
def test_invalid_json_body_is_client_error(client, completion, route):
    response = client.post(route, content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert completion.calls == []


def test_exactly_fifty_trimmed_characters_is_accepted(client, completion):
    completion.reply_with("# Samenvatting")

    response = client.post("/api/generate-summary", json={"text": "  " + "a" * 50 + "  "})

    assert response.status_code == 200
    assert len(completion.calls) == 1

# -----------------------------
# Flashcards
# -----------------------------
def test_generate_flashcards(client, completion):
    completion.reply_with(FLASHCARDS)

    response = client.post("/api/generate-flashcards", json={"text": SAMPLE_TEXT})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert 6 <= len(body["flashcards"]) <= 8
    for card in body["flashcards"]:
        assert card["q"] and card["a"]

    call = completion.calls[0]
    assert call["temperature"] == 0.7
    assert call["max_tokens"] == 1500
    assert SAMPLE_TEXT in call["prompt"]
    assert '"flashcards"' in call["prompt"]


def test_flashcard_prompt_only_embeds_prefix(client, completion):
    completion.reply_with(FLASHCARDS)
    text = "a" * 3000 + "b" * 500

    client.post("/api/generate-flashcards", json={"text": text})

    prompt = completion.calls[0]["prompt"]
    assert "a" * 3000 in prompt
    assert "b" not in prompt.split("Cursustekst:")[1].split("Geef je antwoord")[0]


def test_flashcards_reply_in_code_fence_is_accepted(client, completion):
    completion.reply_with('```json\n{"flashcards": [{"q": "Wat is ATP?", "a": "Energie"}]}\n```')

    response = client.post("/api/generate-flashcards", json={"text": SAMPLE_TEXT})

    assert response.status_code == 200
    assert response.json()["flashcards"] == [{"q": "Wat is ATP?", "a": "Energie"}]


@pytest.mark.parametrize("reply", [
    "Hier zijn je flashcards!",
    '{"flashcards": [{"q": "Vraag"}]}',
    '{"flashcards": [{"q": "", "a": "Antwoord"}]}',
    '{"cards": []}',
    "",
])
def test_malformed_flashcards_reply(client, completion, reply):
    completion.reply_with(reply)

    response = client.post("/api/generate-flashcards", json={"text": SAMPLE_TEXT})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to parse AI response", "details": "AI returned invalid format"}
    assert len(completion.calls) == 1


def test_flashcards_external_failure(client, completion):
    completion.error = RuntimeError("connection reset")

    response = client.post("/api/generate-flashcards", json={"text": SAMPLE_TEXT})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate flashcards", "details": "connection reset"}
    assert len(completion.calls) == 1

# -----------------------------
# Quiz
# -----------------------------
def test_generate_quiz(client, completion):
    completion.reply_with(QUIZ)

    response = client.post("/api/generate-quiz", json={"text": SAMPLE_TEXT})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["quiz"] == QUIZ["quiz"]
    for question in body["quiz"]:
        assert len(question["opts"]) == 4
        assert 0 <= question["correct"] <= 3

    call = completion.calls[0]
    assert call["temperature"] == 0.7
    assert call["max_tokens"] == 2000


@pytest.mark.parametrize("question", [
    {"q": "Vraag?", "opts": ["A", "B", "C"], "correct": 0},
    {"q": "Vraag?", "opts": ["A", "B", "C", "D", "E"], "correct": 0},
    {"q": "Vraag?", "opts": ["A", "B", "C", "D"], "correct": 4},
    {"q": "Vraag?", "opts": ["A", "B", "C", "D"], "correct": -1},
])
def test_quiz_out_of_shape_is_malformed(client, completion, question):
    completion.reply_with({"quiz": [QUIZ["quiz"][0], question]})

    response = client.post("/api/generate-quiz", json={"text": SAMPLE_TEXT})

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to parse AI response"
    assert "quiz" not in response.json()


def test_quiz_external_failure(client, completion):
    completion.error = TimeoutError("upstream timed out")

    response = client.post("/api/generate-quiz", json={"text": SAMPLE_TEXT})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate quiz", "details": "upstream timed out"}

# -----------------------------
# Summary
# -----------------------------
def test_generate_summary_returns_raw_text(client, completion):
    raw = "# Samenvatting\n\n- punt 1\n- punt 2\n\n{niet: geldige json"
    completion.reply_with(raw)

    response = client.post("/api/generate-summary", json={"text": SAMPLE_TEXT})

    assert response.status_code == 200
    assert response.json() == {"success": True, "summary": raw}

    call = completion.calls[0]
    assert call["temperature"] == 0.6
    assert call["max_tokens"] == 2000


def test_summary_prompt_embeds_longer_prefix(client, completion):
    completion.reply_with("ok")
    text = "a" * 4000 + "b" * 100

    client.post("/api/generate-summary", json={"text": text})

    prompt = completion.calls[0]["prompt"]
    assert "a" * 4000 in prompt
    assert "b" not in prompt.split("Cursustekst:")[1].split("Structureer")[0]


def test_summary_external_failure(client, completion):
    completion.error = RuntimeError("invalid api key")

    response = client.post("/api/generate-summary", json={"text": SAMPLE_TEXT})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate summary", "details": "invalid api key"}

# -----------------------------
# Exam questions
# -----------------------------
def test_generate_exam_questions(client, completion):
    completion.reply_with(EXAM)

    response = client.post("/api/generate-exam-questions", json={"text": SAMPLE_TEXT})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["examQuestions"] == EXAM["examQuestions"]

    call = completion.calls[0]
    assert call["temperature"] == 0.6
    assert call["max_tokens"] == 2000


def test_exam_question_type_defaults_to_open(client, completion):
    completion.reply_with({"examQuestions": [{"q": "Bespreek osmose.", "points": 8}]})

    response = client.post("/api/generate-exam-questions", json={"text": SAMPLE_TEXT})

    assert response.status_code == 200
    assert response.json()["examQuestions"] == [{"q": "Bespreek osmose.", "points": 8, "type": "open"}]


def test_exam_question_with_other_type_is_malformed(client, completion):
    completion.reply_with({"examQuestions": [{"q": "Kies A of B.", "points": 8, "type": "closed"}]})

    response = client.post("/api/generate-exam-questions", json={"text": SAMPLE_TEXT})

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to parse AI response"


def test_exam_questions_external_failure(client, completion):
    completion.error = RuntimeError("rate limited")

    response = client.post("/api/generate-exam-questions", json={"text": SAMPLE_TEXT})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate exam questions", "details": "rate limited"}
