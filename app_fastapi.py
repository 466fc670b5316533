# app_fastapi.py
# -*- coding: utf-8 -*-

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# 🔹 config / logging live in the core package
from core.config import CORS_ALLOW_ORIGINS
from core.logging import logger
from routers import health, history, workflow

# ============================================================
# FastAPI app (with Swagger description)
# ============================================================

app = FastAPI(
    title="Workflow Builder Lite API",
    description="""
Backend for **Workflow Builder Lite**, a tiny fixed text workflow.

- The client sends raw text (and optionally a workflow name).
- The backend runs four fixed steps in order
  - Clean text (whitespace cleanup + sentence case)
  - Summarize (first 2 sentences)
  - Extract key points (first 5 sentences as bullets)
  - Tag category (Bug Report / Feature Request / User Feedback / Business / Sales / General)
- Each step's output and the last 5 runs of the session are returned for display.

State is kept in memory only and resets when the process restarts.
""",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(workflow.router)
app.include_router(history.router)


def _route_paths():
    # included-router entries on newer fastapi have no .path
    return [p for p in (getattr(r, "path", None) for r in app.routes) if p]


logger.debug("registered routes: " + ", ".join(_route_paths()))


@app.get(
    "/debug/routes",
    tags=["debug"],
    summary="Registered route paths (debug)",
)
def debug_routes():
    return _route_paths()

# ============================================================
# uvicorn entry point
# ============================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app_fastapi:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
