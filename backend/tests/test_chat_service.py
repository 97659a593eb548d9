from screener.models.chat_models import Sender
from screener.models.resume_models import ResumeFacts
from screener.services import dialogue_selector as ds
from screener.services import session_store
from screener.services.chat_service import respond

NEUTRAL = "I have spent many years building software for large retail companies"


def _session():
    session_store.clear_sessions()
    facts = ResumeFacts(candidate_name="Jane Doe", skills=("python", "sql"))
    return session_store.create_session(facts=facts, file_name="jane.txt")


def test_respond_appends_user_then_agent_turn():
    session = _session()

    reply = respond(session, "I love coding")

    assert reply == ds.TERSE_REPLY
    assert [t.sender for t in session.turns] == [Sender.USER, Sender.AGENT]
    assert session.turns[0].text == "I love coding"
    assert session.turns[1].text == reply
    assert session.turns[0].timestamp <= session.turns[1].timestamp


def test_conversation_rotates_through_skills_then_closes():
    session = _session()

    replies = [respond(session, NEUTRAL) for _ in range(3)]

    assert replies == [
        ds.SKILL_ROTATION_REPLY.format(skill="python"),
        ds.SKILL_ROTATION_REPLY.format(skill="sql"),
        ds.CLOSING_REPLY,
    ]
    assert len(session.turns) == 6


def test_session_store_roundtrip():
    session = _session()
    assert session_store.get_session(session.id) is session
    assert session_store.list_sessions() == [session]
    assert session_store.clear_sessions() == 1
    assert session_store.get_session(session.id) is None
