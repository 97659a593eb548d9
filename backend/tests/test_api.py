from screener.models.resume_models import ResumeFacts
from screener.services import dialogue_selector as ds
from screener.services import resume_service


def _open(client, text):
    res = client.post("/api/resumes/text", json={"text": text})
    assert res.status_code == 200, res.text
    return res.json()


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


def test_text_resume_opens_session(client, jane_resume):
    body = _open(client, jane_resume)

    facts = body["facts"]
    assert facts["candidate_name"] == "Jane Doe"
    assert {"python", "sql", "docker"} <= set(facts["skills"])
    assert body["session_id"]


def test_blank_resume_is_unprocessable(client):
    res = client.post("/api/resumes/text", json={"text": "   \n "})
    assert res.status_code == 422
    assert "Could not read" in res.json()["detail"]


def test_upload_txt_file(client, jane_resume):
    res = client.post(
        "/api/resumes/upload",
        files={"file": ("jane.txt", jane_resume.encode("utf-8"), "text/plain")},
    )
    assert res.status_code == 200, res.text
    assert res.json()["file_name"] == "jane.txt"
    assert res.json()["facts"]["candidate_name"] == "Jane Doe"


def test_upload_unsupported_type(client):
    res = client.post(
        "/api/resumes/upload",
        files={"file": ("jane.png", b"\x89PNG", "image/png")},
    )
    assert res.status_code == 400


def test_upload_empty_document(client):
    res = client.post(
        "/api/resumes/upload",
        files={"file": ("empty.txt", b"  \n\n ", "text/plain")},
    )
    assert res.status_code == 422


def test_chat_flow(client, jane_resume):
    session_id = _open(client, jane_resume)["session_id"]

    res = client.post("/api/chat", json={"session_id": session_id, "message": "I love coding"})
    assert res.status_code == 200
    assert res.json()["response"] == ds.TERSE_REPLY
    assert res.json()["turns"] == 2

    res = client.post(
        "/api/chat",
        json={"session_id": session_id, "message": "Thanks, what about the salary?"},
    )
    assert res.json()["response"] == ds.GRATITUDE_REPLY

    session = client.get(f"/api/sessions/{session_id}").json()
    assert [t["sender"] for t in session["turns"]] == ["user", "agent", "user", "agent"]
    assert session["turns"][2]["text"] == "Thanks, what about the salary?"


def test_chat_unknown_session(client):
    res = client.post("/api/chat", json={"session_id": "nope", "message": "hello"})
    assert res.status_code == 404


def test_chat_empty_message(client, jane_resume):
    session_id = _open(client, jane_resume)["session_id"]
    res = client.post("/api/chat", json={"session_id": session_id, "message": "  "})
    assert res.status_code == 400


def test_get_unknown_session(client):
    assert client.get("/api/sessions/missing").status_code == 404


def test_list_and_clear_sessions(client, jane_resume):
    _open(client, jane_resume)
    _open(client, jane_resume)

    assert len(client.get("/api/resumes/sessions").json()) == 2
    assert client.delete("/api/resumes/sessions").json() == {"cleared": 2}
    assert client.get("/api/resumes/sessions").json() == []


def test_llm_headers_enable_merge(client, monkeypatch, jane_resume):
    seen = {}

    async def fake_extract_with_llm(*, text, provider, model_key, api_key):
        seen.update(provider=provider, model_key=model_key, api_key=api_key)
        return ResumeFacts(candidate_name="", skills=("Kubernetes",))

    monkeypatch.setattr(resume_service, "extract_with_llm", fake_extract_with_llm)

    res = client.post(
        "/api/resumes/text",
        json={"text": jane_resume},
        headers={"X-LLM-Provider": "groq", "X-Groq-Key": "secret"},
    )

    assert res.status_code == 200, res.text
    facts = res.json()["facts"]
    assert seen == {"provider": "groq", "model_key": "llama-3.3-70b", "api_key": "secret"}
    assert facts["candidate_name"] == "Jane Doe"
    assert "kubernetes" in facts["skills"]
    assert facts["skills"] == sorted(facts["skills"])
    assert facts["experience_entries"] == []
