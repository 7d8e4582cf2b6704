"""Data model for the result of merging a list of resources."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MergeOutcome:
    """Merged content plus what happened to each resource."""

    content: str
    resources: list[str] = field(default_factory=list)  # merge order
    missing: list[str] = field(default_factory=list)  # fetch returned None
    failed: list[str] = field(default_factory=list)  # fetch raised an error
