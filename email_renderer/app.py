"""
EMAIL RENDERER — FastAPI app
Démarrer : uvicorn email_renderer.app:app --reload --port 8002
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .router import router as email_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Email Renderer", version="1.0.0", docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(email_router)


@app.get("/health")
def health():
    return {"status": "ok"}
