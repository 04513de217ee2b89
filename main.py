import time
from datetime import datetime, timezone

from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse
from peewee import PeeweeException
from slowapi.errors import RateLimitExceeded

from api.v1.public import betting, matches, players, standings, stats, teams
from core.correlation_middleware import CorrelationMiddleware
from core.db_middleware import DatabaseMiddleware
from core.errors import register_exception_handlers
from core.logging import get_logger, setup_logging
from core.middleware import setup_middleware
from core.rate_limit import limiter, rate_limit_exceeded_handler
from core.settings import settings
from db.base import close_db, db, init_db

STARTED_AT = time.monotonic()


async def lifespan(app: FastAPI):
    # Setup structured logging first
    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )
    log = get_logger()
    log.info("application_starting", service=settings.service_name, environment=settings.environment)

    # Initialize database
    init_db()
    log.info("database_initialized")

    yield

    # Close database connection
    close_db()
    log.info("application_stopped")


app = FastAPI(
    title="IPL Stats API",
    description="Read-only statistics for the Indian Premier League 2022 season",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Teams", "description": "Teams, squads and team fixtures"},
        {"name": "Players", "description": "Player profiles, rankings and innings records"},
        {"name": "Matches", "description": "Matches, scorecards, wagon wheels and commentary"},
        {"name": "Standings", "description": "Points table by round"},
        {"name": "Stats", "description": "Tournament-wide statistics"},
        {"name": "Betting", "description": "Static betting insights and match predictor"},
    ],
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
register_exception_handlers(app)

# Add middlewares (order matters - first added = outermost)
app.add_middleware(CorrelationMiddleware)  # Outermost: adds correlation ID
app.add_middleware(DatabaseMiddleware)
setup_middleware(app)

# API v1 Public routes
api_v1_public = APIRouter(prefix="/v1")
api_v1_public.include_router(teams.router)
api_v1_public.include_router(players.router)
api_v1_public.include_router(matches.router)
api_v1_public.include_router(standings.router)
api_v1_public.include_router(stats.router)
api_v1_public.include_router(betting.router)

app.include_router(api_v1_public)


@app.get("/")
async def root():
    return {"message": "Welcome to the IPL Stats API"}


@app.get("/health", tags=["Health"])
async def health():
    """Liveness plus a database round trip. 503 when the database is unreachable."""
    body = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
        "database": "connected",
    }
    try:
        db.execute_sql("SELECT 1")
    except (PeeweeException, AttributeError) as e:
        get_logger().warning("health_check_failed", error=str(e))
        body.update(status="unhealthy", database="disconnected", error=str(e))
        return JSONResponse(status_code=503, content=body)
    return body
