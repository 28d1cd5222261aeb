# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


import os
import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from apscheduler.schedulers.background import BackgroundScheduler
from pytz import timezone
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from mindhaven.models import database  # package import registers all models

from mindhaven.routers import (
    auth_router,
    journal_router,
    mood_router,
    activity_router,
    progress_router,
    review_router,
    dashboard_router,
    ai_router,
    api_router,
)
from mindhaven.utils.rate_limit_utils import limiter
from mindhaven.utils.schedulers.weekly_chart_reset import reset_progress_charts
from mindhaven.utils.schedulers.chat_state_cleaner import clean_idle_chat_states

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
    if origin.strip()
]
ENABLE_SCHEDULER = os.getenv("ENABLE_SCHEDULER", "true").lower() == "true"
SCHEDULER_TIMEZONE = timezone(os.getenv("SCHEDULER_TIMEZONE", "UTC"))


# Create DB tables in one go
database.Base.metadata.create_all(bind=database.engine)

# Scheduler setup
scheduler = BackgroundScheduler(job_defaults={"misfire_grace_time": 60})


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not ENABLE_SCHEDULER:
        yield
        return

    # 🗓️ Fresh weekly charts every Monday just after midnight
    scheduler.add_job(reset_progress_charts, "cron", day_of_week="mon", hour=0, minute=5, timezone=SCHEDULER_TIMEZONE)

    # 🧹 Drop idle chatbot conversation state every hour
    scheduler.add_job(clean_idle_chat_states, "cron", minute=15, timezone=SCHEDULER_TIMEZONE)

    scheduler.start()
    logger.info("✅ Scheduler started")
    yield
    scheduler.shutdown()


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="MindHaven API",
    description="Journaling, mood tracking, activities, progress and an AI wellness companion",
    version="1.0"
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET, https_only=os.getenv("ENV") == "production")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Cache-Control"],
)

# Include routers
app.include_router(auth_router.router)
app.include_router(dashboard_router.router)
app.include_router(journal_router.router)
app.include_router(mood_router.router)
app.include_router(activity_router.router)
app.include_router(progress_router.router)
app.include_router(review_router.router)
app.include_router(ai_router.router)
app.include_router(api_router.router)


# ---------------------- EXCEPTION HANDLERS ----------------------

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return JSONResponse(
            status_code=404,
            content={
                "success": False,
                "error": "Route not found",
                "path": request.url.path,
                "method": request.method,
            }
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": f"{field}: {message}" if field else message}
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": "Too many requests. Please slow down."}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("🛑 Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "error": "Something broke!"})


@app.get("/")
def read_root():
    return {"message": "MindHaven API is running"}


@app.get("/health", tags=["Infra"])
def health_check():
    return {"status": "ok", "timestamp": datetime.utcnow().isoformat()}
