from peewee import OperationalError
from starlette.middleware.base import BaseHTTPMiddleware

from core.logging import get_logger
from db.base import db


class DatabaseMiddleware(BaseHTTPMiddleware):
    """Open a connection for each request and release it afterwards."""

    async def dispatch(self, request, call_next):
        if db.is_closed():
            try:
                db.connect(reuse_if_open=True)
            except OperationalError as e:
                # Let /health report it; queries will fail on their own
                get_logger("db").warning("database_connect_failed", error=str(e))

        try:
            response = await call_next(request)
            return response
        finally:
            if not db.is_closed():
                db.close()
