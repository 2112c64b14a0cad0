"""Validated search requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridpath.search.finder import PathFinder
from gridpath.search.position import Position


class SearchRequest(BaseModel):
    """Grid bounds, endpoints and obstacles for one search.

    The finders themselves only bound-check the cells they expand into, so
    endpoints are checked here before a search starts.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = Field(ge=1)
    height: int = Field(ge=1)
    start: Position
    goal: Position
    blocked: frozenset[Position] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def validate_endpoints(self) -> "SearchRequest":
        for label, position in (("start", self.start), ("goal", self.goal)):
            if not self.contains(position):
                raise ValueError(
                    f"{label} {position} is outside the "
                    f"{self.width}x{self.height} grid"
                )
        return self

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def solve_with(self, finder: PathFinder) -> list[Position] | None:
        return finder.find_path(
            self.width, self.height, self.start, self.goal, self.blocked
        )
