from peewee import DatabaseProxy, Model
from playhouse.db_url import connect

from core.settings import settings

# Bound to a concrete database by init_db() so the same models can run on
# pooled PostgreSQL in production and on SQLite in tests.
db = DatabaseProxy()


class BaseModel(Model):
    class Meta:
        database = db

    @classmethod
    def upsert(cls, key: dict, values: dict | None = None):
        """
        Insert a row identified by its natural key, or overwrite the non-key
        columns of the existing row. Returns the stored row.

        Requires a unique constraint covering exactly the `key` columns.
        """
        values = values or {}
        conflict_target = [cls._meta.fields[name] for name in key]

        query = cls.insert(**key, **values)
        if values:
            query = query.on_conflict(
                conflict_target=conflict_target,
                update={cls._meta.fields[name]: value for name, value in values.items()},
            )
        else:
            query = query.on_conflict_ignore()
        query.execute()

        return cls.get(*[cls._meta.fields[name] == value for name, value in key.items()])

    @classmethod
    def has_rows(cls) -> bool:
        return cls.select().exists()


def _connect_params(url: str) -> dict:
    if "+pool" in url.split("://", 1)[0]:
        return {
            "max_connections": settings.db_max_connections,
            "stale_timeout": settings.db_stale_timeout,
        }
    return {}


def init_db(url: str | None = None):
    """Initialize database connection and create tables if they don't exist."""
    url = url or settings.database_url
    db.initialize(connect(url, **_connect_params(url)))
    db.connect(reuse_if_open=True)

    # Import all models to register them
    from db.models import ALL_MODELS

    db.create_tables(ALL_MODELS, safe=True)
    return db


def close_db():
    """Close database connection."""
    if db.obj is not None and not db.is_closed():
        db.close()
