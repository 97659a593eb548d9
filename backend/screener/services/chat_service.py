"""
Chat Service — run one exchange of the screening conversation.
"""

from __future__ import annotations

import logging

from screener.models.chat_models import ConversationTurn, Sender, Session
from screener.services.dialogue_selector import next_reply

logger = logging.getLogger(__name__)


def respond(session: Session, message: str) -> str:
    """Pick the reply for ``message`` and record both turns on the session.

    The reply is computed from the history as it stood before this message;
    the user turn is then appended, followed by the agent turn.
    """
    reply = next_reply(session.facts, session.turns, message)

    session.turns.append(ConversationTurn(sender=Sender.USER, text=message))
    session.turns.append(ConversationTurn(sender=Sender.AGENT, text=reply))

    logger.info(f"Chat reply for session {session.id} (turn {len(session.turns)}): {reply}")
    return reply
