"""Nail Logic — FastAPI Application.

This module defines the FastAPI ``app`` instance, the REST routes behind the
studio page, and the ``main()`` CLI function that launches the uvicorn
server.

Architecture
------------
- **Studio data** (name, owner, links) comes from
  :func:`~naillogic.core.studio.default_profile` and is served to the page via
  ``GET /api/config``.
- **Image generation** is performed by
  :class:`~naillogic.core.gemini_client.ImageGenerationClient`, built once in
  the lifespan handler and stored on ``app.state``.  Every
  ``POST /api/generate`` call drives a fresh
  :class:`~naillogic.ui.controller.GenerationRequestController`, so the REST
  surface itself holds no form state.
- **The HTML page** is served as a raw ``HTMLResponse``; the page script
  fetches ``/api/config`` and renders the links client-side.

Endpoints
---------
========  ==================  ==========================================
Method    Path                Purpose
========  ==================  ==========================================
GET       ``/``               Serve the studio page
GET       ``/api/config``     Version, studio profile and links
POST      ``/api/generate``   Generate one nail-art concept image
POST      ``/api/suggest``    Suggest a design description for a mood
GET       ``/health``         Health check
========  ==================  ==========================================

Usage
-----
CLI (installed entry point)::

    naillogic

Direct invocation::

    python -m naillogic.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from naillogic import __version__
from naillogic.api.models import (
    GenerateDesignRequest,
    GenerateDesignResponse,
    SuggestRequest,
    SuggestResponse,
)
from naillogic.core.config import config
from naillogic.core.gemini_client import (
    DesignSuggestionClient,
    ImageGenerationClient,
    create_genai_client,
)
from naillogic.core.studio import default_profile
from naillogic.ui.controller import GenerationRequestController

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application lifecycle: Gemini client setup.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the studio profile and the Gemini clients on startup.

    Both clients share one SDK handle.  A missing API key is not an error:
    the handle is ``None`` and the clients degrade on each call.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    profile = default_profile()
    sdk_client = create_genai_client(config)

    app.state.profile = profile
    app.state.image_client = ImageGenerationClient.from_config(config, sdk_client=sdk_client)
    app.state.suggestion_client = DesignSuggestionClient.from_config(
        config, sdk_client=sdk_client, owner=profile.owner_first_name
    )
    logger.info(
        f"Design Atelier ready (model={config.image_model_id}, "
        f"configured={app.state.image_client.is_configured})."
    )

    yield


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Nail Logic",
    description="Studio link page with an AI nail-art Design Atelier.",
    version=__version__,
    lifespan=lifespan,
)

# In production, restrict ``allow_origins`` to the deployment domain.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(config.static_dir)), name="static")


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the studio page.

    Returns:
        The HTML content of ``templates/index.html``.

    Raises:
        HTTPException: 404 if ``index.html`` is not found.
    """
    index_path = config.templates_dir / "index.html"
    if index_path.exists():
        return HTMLResponse(content=index_path.read_text(encoding="utf-8"))
    raise HTTPException(status_code=404, detail="index.html not found")


@app.get("/api/config")
async def get_config(request: Request) -> dict:
    """Return the studio profile and links for the page script.

    Returns:
        Dictionary with keys ``version``, ``studio`` (name, owner, initials,
        booking URL) and ``links``.
    """
    profile = request.app.state.profile
    return {
        "version": __version__,
        "studio": {
            "name": profile.name,
            "owner": profile.owner,
            "initials": profile.initials,
            "booking_url": profile.booking_url,
        },
        "links": [link.model_dump() for link in profile.links],
    }


@app.post("/api/generate", response_model=GenerateDesignResponse)
async def generate_design(req: GenerateDesignRequest, request: Request) -> dict:
    """Generate one nail-art concept image for the submitted prompt.

    Failures never surface as HTTP errors: an empty result, a missing
    credential and a service failure all return ``state="error"`` with the
    same generic message.  A blank prompt returns ``state="idle"`` and no
    outbound call is made.

    Args:
        req: Validated :class:`GenerateDesignRequest` payload.

    Returns:
        The controller's final snapshot as ``{state, image, message}``.
    """
    controller = GenerationRequestController(request.app.state.image_client)
    snapshot = await controller.submit(req.prompt)
    return snapshot.to_dict()


@app.post("/api/suggest", response_model=SuggestResponse)
async def suggest_design(req: SuggestRequest, request: Request) -> dict:
    """Suggest a short design description for a mood.

    Raises:
        HTTPException: 400 if ``mood`` is blank.
    """
    mood = req.mood.strip()
    if not mood:
        raise HTTPException(status_code=400, detail="mood must not be blank")
    suggestion = await request.app.state.suggestion_client.suggest(mood)
    return {"suggestion": suggestion}


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~naillogic.core.config.config`
    (``NAILLOGIC_SERVER_HOST`` and ``NAILLOGIC_SERVER_PORT``).  Defaults to
    ``0.0.0.0:7860``.
    """
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "naillogic.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
