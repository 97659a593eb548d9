import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from screener.config import settings
from screener.api import resume_routes, chat_routes

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Resume fact extraction and scripted candidate screening chat",
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(resume_routes.router, prefix="/api/resumes", tags=["Resumes"])
app.include_router(chat_routes.router, prefix="/api", tags=["Chat"])

# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": "0.1.0"}
