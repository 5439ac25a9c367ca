from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.api import runtime

_bootstrap = runtime.ensure_bootstrap()
runtime.load_environment()

from apps.api.routes import evaluations_router, loans_router
from immoroi import __version__
from immoroi.infrastructure.config import SETTINGS

runtime.configure_logging(SETTINGS.LOG_LEVEL)

app = FastAPI(title="Investment Evaluation API", version=__version__)
LOGGER = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.API_CORS_ORIGINS),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(evaluations_router)
app.include_router(loans_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "version": __version__}


@app.on_event("startup")
async def _startup() -> None:
    LOGGER.info("Evaluation API %s started (log level %s)", __version__, SETTINGS.LOG_LEVEL)
