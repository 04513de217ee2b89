"""
Pipeline Registry and Exports

Provides a registry of all import stages and helper functions for running
them by name.
"""

from typing import Type

from core.logging import get_logger
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.teams import TeamsPipeline
from pipelines.squads import SquadsPipeline
from pipelines.player_career_stats import PlayerCareerStatsPipeline
from pipelines.competition_venues import CompetitionVenuesPipeline
from pipelines.matches import MatchesPipeline
from pipelines.scorecards import ScorecardsPipeline
from pipelines.standings import StandingsPipeline
from pipelines.aggregates import BattingAggregatesPipeline, BowlingAggregatesPipeline
from pipelines.team_stats import TeamStatsPipeline
from pipelines.wagon_wheels import WagonWheelsPipeline
from pipelines.commentary import CommentaryPipeline
from schemas.pipeline import PipelineResult
from schemas.common import ApiStatus


# Registry of all import stages
# Order matters for run_all_pipelines - parents must be loaded before children
PIPELINE_REGISTRY: dict[str, Type[BasePipeline]] = {
    # Dimension data
    "teams": TeamsPipeline,
    "squads": SquadsPipeline,
    "player_career_stats": PlayerCareerStatsPipeline,
    "competition_venues": CompetitionVenuesPipeline,
    # Matches and scorecards
    "matches": MatchesPipeline,
    "scorecards": ScorecardsPipeline,
    "standings": StandingsPipeline,
    # Tournament aggregates
    "batting_aggregates": BattingAggregatesPipeline,
    "bowling_aggregates": BowlingAggregatesPipeline,
    "team_stats": TeamStatsPipeline,
    # Ball-level data (bulk loaded)
    "wagon_wheels": WagonWheelsPipeline,
    "commentary": CommentaryPipeline,
}


def get_pipeline(name: str, data_dir: str | None = None) -> BasePipeline:
    """
    Get a pipeline instance by name.

    Args:
        name: Pipeline name (e.g., "teams")
        data_dir: Fixture directory, defaults to settings.fixtures_dir

    Returns:
        Instantiated pipeline

    Raises:
        KeyError: If pipeline name not found
    """
    if name not in PIPELINE_REGISTRY:
        available = ", ".join(PIPELINE_REGISTRY.keys())
        raise KeyError(f"Unknown pipeline '{name}'. Available: {available}")

    return PIPELINE_REGISTRY[name](data_dir=data_dir)


async def run_pipeline(name: str, data_dir: str | None = None) -> PipelineResult:
    """Run a single stage by name."""
    pipeline = get_pipeline(name, data_dir)
    return await pipeline.run()


async def run_all_pipelines(data_dir: str | None = None) -> dict[str, PipelineResult]:
    """
    Run all stages in registration order.

    Stops at the first failed stage; later stages depend on the rows earlier
    ones write. Stages that are skipped because their tables already hold
    data count as successful.

    Returns:
        Dict mapping pipeline name to PipelineResult, for the stages that ran
    """
    log = get_logger("pipeline").bind(operation="run_all")

    results = {}
    pipeline_names = list(PIPELINE_REGISTRY.keys())

    log.info("all_pipelines_started", count=len(pipeline_names))

    for i, name in enumerate(pipeline_names, 1):
        log.info("running_pipeline", pipeline=name, step=f"{i}/{len(pipeline_names)}")
        results[name] = await run_pipeline(name, data_dir)
        if results[name].status != ApiStatus.SUCCESS:
            log.error("import_aborted", pipeline=name, error=results[name].error)
            break

    success_count = sum(1 for r in results.values() if r.status == ApiStatus.SUCCESS)
    skipped_count = sum(1 for r in results.values() if r.skipped)
    log.info(
        "all_pipelines_completed",
        success_count=success_count,
        skipped_count=skipped_count,
        total_count=len(pipeline_names),
    )

    return results


def list_pipelines() -> list[dict]:
    """
    List all available pipelines with their configurations.

    Returns:
        List of pipeline info dicts
    """
    return [cls.get_info() for cls in PIPELINE_REGISTRY.values()]


__all__ = [
    # Base classes
    "BasePipeline",
    "PipelineConfig",
    "PipelineContext",
    # Stages
    "TeamsPipeline",
    "SquadsPipeline",
    "PlayerCareerStatsPipeline",
    "CompetitionVenuesPipeline",
    "MatchesPipeline",
    "ScorecardsPipeline",
    "StandingsPipeline",
    "BattingAggregatesPipeline",
    "BowlingAggregatesPipeline",
    "TeamStatsPipeline",
    "WagonWheelsPipeline",
    "CommentaryPipeline",
    # Registry functions
    "PIPELINE_REGISTRY",
    "get_pipeline",
    "run_pipeline",
    "run_all_pipelines",
    "list_pipelines",
]
