"""
Email Builder: FastAPI app
Démarrer : uvicorn email_builder.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import log_level
from .router import router

logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Email Builder", version=__version__, docs_url="/docs")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    log.info("email_builder %s prêt", __version__)
    return app


app = create_app()
