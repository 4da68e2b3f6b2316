from fastapi import FastAPI
from vendor_ai.core.config import get_settings
from vendor_ai.core.lifespan import lifespan
from vendor_ai.api.v1.routers.health import router as health_router
from vendor_ai.api.v1.routers.suggestions import router as suggestions_router
from vendor_ai.core.logging import configure_logging

from fastapi.middleware.cors import CORSMiddleware
import logging

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS from env (CSV), "*" by default: the dashboard may be served from anywhere.
# NB: allow_credentials=True + "*" is forbidden, keep it False.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins or ["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# ------- Routes -------
app.include_router(health_router)            # "/" and "/health"
app.include_router(suggestions_router)       # POST /api/groq


def run():
    import uvicorn

    logging.getLogger(__name__).info(f"🚀 Server is running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
