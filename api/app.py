import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routers import style as style_router
from .middleware.logging import LoggingMiddleware


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="stylebrief", version="0.1.0")

# CORS: localhost for development, configured origins otherwise
app_env = os.getenv("APP_ENV")
is_dev = app_env is None or app_env.lower() in {"dev", "development"}

if is_dev:
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=86400,
    )
else:
    allowed = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "").split(",") if origin.strip()]
    preview = os.getenv("PREVIEW_ORIGIN")  # e.g. a deploy preview URL
    if preview:
        allowed.append(preview)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=86400,
    )

app.add_middleware(LoggingMiddleware)

app.include_router(style_router.router)


@app.get("/__health")
def health():
    return {"ok": True}


@app.get("/")
def root():
    return {"message": "stylebrief API is running. See /__health and /docs."}
