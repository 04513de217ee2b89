"""
Base Pipeline

Abstract base class for all fixture import stages.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from core.settings import settings
from db.base import BaseModel
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.extractors import FixtureExtractor
from schemas.pipeline import PipelineResult


class BasePipeline(ABC):
    """
    Abstract base class for all import stages.

    Provides:
    - Automatic run tracking via PipelineContext
    - Skipping of stages whose target tables already hold rows
    - Standardized error handling
    - Template method pattern for run lifecycle

    Subclasses must implement:
    - config: PipelineConfig class attribute
    - target_models: models whose row counts gate the stage
    - execute(): The actual stage logic

    Example:
        class TeamsPipeline(BasePipeline):
            config = PipelineConfig(
                name="teams",
                display_name="Teams",
                description="Franchises from teams/teams.json",
                target_tables=("teams",),
            )
            target_models = (Team,)

            async def execute(self, ctx: PipelineContext) -> None:
                for record in self.fixtures.read_json("teams/teams.json") or []:
                    Team.upsert_team(record["tid"], {...})
                    ctx.increment_records()
    """

    # Class-level configuration - must be overridden by subclasses
    config: ClassVar[PipelineConfig]
    target_models: ClassVar[tuple[type[BaseModel], ...]] = ()

    def __init__(self, data_dir: str | None = None):
        """Initialize pipeline and validate configuration."""
        self._validate_config()
        self.fixtures = FixtureExtractor(data_dir or settings.fixtures_dir)

    def _validate_config(self) -> None:
        """Validate that config is properly defined."""
        if not hasattr(self.__class__, "config") or self.__class__.config is None:
            raise ValueError(
                f"{self.__class__.__name__} must define a 'config' class attribute"
            )

    @abstractmethod
    async def execute(self, ctx: PipelineContext) -> None:
        """
        Execute the stage logic.

        Args:
            ctx: Pipeline context with logging, tracking, and timing

        Raises:
            Any exception will be caught and converted to a failed result
        """
        pass

    def existing_rows(self) -> dict[str, int]:
        """Row counts of the target tables, keyed by table name."""
        return {
            model._meta.table_name: model.select().count()
            for model in self.target_models
        }

    def should_skip(self, existing: dict[str, int]) -> bool:
        """A stage is skipped as soon as any of its target tables has rows."""
        return any(existing.values())

    async def run(self) -> PipelineResult:
        """
        Run the stage with full lifecycle management.

        This is the public entry point. It:
        1. Creates a PipelineContext
        2. Skips the stage if its tables are already populated
        3. Calls execute()
        4. Returns success, skipped or failure result

        Returns:
            PipelineResult with status, timing, and records processed
        """
        ctx = PipelineContext(self.config.name)
        ctx.start_tracking()

        try:
            existing = self.existing_rows()
            if self.should_skip(existing):
                return ctx.mark_skipped(existing)

            # Pre-run hook
            await self.before_execute(ctx)

            # Main execution
            await self.execute(ctx)

            # Post-run hook
            await self.after_execute(ctx)

            return ctx.mark_success()

        except Exception as e:
            return ctx.mark_failed(e)

    async def before_execute(self, ctx: PipelineContext) -> None:
        """
        Hook called before execute().

        Override for validation or setup tasks.
        """
        pass

    async def after_execute(self, ctx: PipelineContext) -> None:
        """Hook called after successful execute()."""
        pass

    @classmethod
    def get_name(cls) -> str:
        """Get the pipeline name from config."""
        return cls.config.name

    @classmethod
    def get_info(cls) -> dict:
        """Get pipeline information for listing."""
        return {
            "name": cls.config.name,
            "display_name": cls.config.display_name,
            "description": cls.config.description,
            "target_tables": list(cls.config.target_tables),
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name={self.config.name})>"
