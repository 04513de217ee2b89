"""
Pipeline Configuration

Static description of an import stage, declared once per pipeline class.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PipelineConfig:
    """
    Configuration for a single import stage.

    Attributes:
        name: Registry key, also used with `--stage` on the command line
        display_name: Human readable name for summaries
        description: One line description of what the stage loads
        target_tables: Tables the stage writes; checked before running so a
            populated stage is skipped
    """

    name: str
    display_name: str
    description: str
    target_tables: tuple[str, ...] = field(default_factory=tuple)
