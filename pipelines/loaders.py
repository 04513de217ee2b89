"""
Bulk Loader

Inserts large batches of ball-level rows. The whole batch goes in as one
insert-or-ignore statement; if the database rejects it, the batch is retried
in fixed-size chunks so that a single bad chunk only loses its own rows.
"""

from peewee import PeeweeException, chunked

from core.logging import get_logger
from db.base import BaseModel, db


class BulkLoader:
    def __init__(self, model: type[BaseModel], chunk_size: int = 1000, log=None):
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self.model = model
        self.chunk_size = chunk_size
        self.log = (log or get_logger("loader")).bind(table=model._meta.table_name)

    def _insert(self, rows: list[dict]) -> int:
        """Insert rows, skipping unique-key duplicates. Returns rows inserted."""
        return self.model.insert_many(rows).on_conflict_ignore().as_rowcount().execute()

    def load(self, rows: list[dict]) -> int:
        """
        Load rows and return how many were actually inserted.

        Duplicates are not counted. Chunk failures in the fallback path are
        logged and skipped.
        """
        if not rows:
            return 0

        self.log.info("bulk_insert_started", rows=len(rows))
        try:
            with db.atomic():
                inserted = self._insert(rows)
            self.log.info("bulk_insert_completed", inserted=inserted)
            return inserted
        except PeeweeException as e:
            self.log.warning(
                "bulk_insert_failed",
                error=str(e),
                fallback_chunk_size=self.chunk_size,
            )

        inserted = 0
        for index, chunk in enumerate(chunked(rows, self.chunk_size)):
            try:
                with db.atomic():
                    inserted += self._insert(chunk)
            except PeeweeException as e:
                self.log.error(
                    "chunk_insert_failed",
                    chunk=index,
                    chunk_rows=len(chunk),
                    error=str(e),
                )
                continue
            self.log.info("chunk_progress", inserted=inserted, total=len(rows))

        self.log.info("chunked_insert_completed", inserted=inserted, total=len(rows))
        return inserted
