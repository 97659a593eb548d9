from screener.api import (
    resume_routes,
    chat_routes,
)

__all__ = [
    "resume_routes",
    "chat_routes",
]
