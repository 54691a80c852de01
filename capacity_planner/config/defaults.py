"""
Default planning values grouped by category.

Used by the ``defaults`` CLI command and by callers that need the baseline
policy without loading a configuration file.
"""

from typing import Any

from capacity_planner.config.models import PlannerConfig

CATEGORIES = ("vacation_policy", "date_gaps", "hackathon_config", "release_config", "all")


def get_defaults(category: str = "all", config: PlannerConfig | None = None) -> dict[str, Any]:
    """
    Get planning defaults for a category.

    Unknown categories return everything, like ``all``.

    Args:
        category: One of CATEGORIES
        config: Configuration to read from (built-in defaults if None)

    Returns:
        JSON-compatible dictionary of default values
    """
    config = config or PlannerConfig()

    sections = {
        "vacation_policy": config.leave.model_dump(mode="json"),
        "date_gaps": config.date_gaps.model_dump(mode="json"),
        "hackathon_config": config.hackathon.model_dump(mode="json"),
        "release_config": config.release.model_dump(mode="json"),
    }

    if category in sections:
        return sections[category]
    return sections
