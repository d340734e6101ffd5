"""FastAPI entrypoint for the booking agent backend.

- `booking_agent/extraction/` turns call summaries into booking fields
- `booking_agent/routes/` for API and webhook endpoints
- `booking_agent/services/` for persistence and notification side effects
- `booking_agent/db/` for SQLAlchemy models and session management
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from booking_agent.core.config import LOG_LEVEL
from booking_agent.core.exceptions import register_exception_handlers
from booking_agent.core.middleware import RequestContextMiddleware
from booking_agent.db.init_db import init_db
from booking_agent.routes import bookings, webhook

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Initialize app resources before serving traffic."""
    init_db()
    logger.info("BookingAgent server starting")
    yield


app = FastAPI(
    title="BookingAgent API",
    version="1.0.0",
    description="Turns voice-assistant call summaries into confirmed bookings.",
    lifespan=lifespan,
)

app.add_middleware(RequestContextMiddleware)
register_exception_handlers(app)

app.include_router(webhook.router)
app.include_router(bookings.router)


@app.get("/", tags=["health"])
def root() -> dict[str, str]:
    """Simple status endpoint for uptime checks."""
    return {"status": "BookingAgent API is running", "version": "1.0.0"}
