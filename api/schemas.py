"""Wire models for the arena update posted by the game server."""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

from arena.core.types import Facing
from arena.snapshot import ArenaSnapshot, PlayerState


class StrictModel(BaseModel):
    # Wrong-typed values ("2" for an int, "false" for a bool) are rejected, not coerced.
    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)


class Link(StrictModel):
    href: str


class Links(StrictModel):
    self_link: Link = Field(alias="self")


class PlayerStateModel(StrictModel):
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    direction: Literal["N", "E", "S", "W"]
    was_hit: bool = Field(default=False, alias="wasHit")
    score: int = 0

    def to_state(self) -> PlayerState:
        return PlayerState(
            x=self.x,
            y=self.y,
            facing=Facing.from_code(self.direction),
            was_hit=self.was_hit,
            score=self.score,
        )


class ArenaModel(StrictModel):
    # [width, height]; a list because request bodies are validated as Python objects.
    dimensions: Annotated[List[int], Field(min_length=2, max_length=2)]
    state: Dict[str, PlayerStateModel]


class ArenaUpdate(StrictModel):
    """
    One turn notification.

    ``_links.self.href`` identifies which player in ``arena.state`` is us.
    """

    links: Links = Field(alias="_links")
    arena: ArenaModel

    @property
    def self_id(self) -> str:
        return self.links.self_link.href

    def to_snapshot(self) -> ArenaSnapshot:
        width, height = self.arena.dimensions
        return ArenaSnapshot(
            width=width,
            height=height,
            players={pid: p.to_state() for pid, p in self.arena.state.items()},
        )
