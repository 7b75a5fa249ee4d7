"""Pydantic schemas for player stats and the rendered stats panel."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PlayerStats(BaseModel):
    """Stats record returned by the upstream API.

    Every field is optional and untyped; values are stored as upstream sent
    them. Missing values stay None here and are only replaced with a
    placeholder when rendered. Unknown upstream fields are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    username: Any = Field(
        default=None,
        description="Player display name.",
    )
    level: Any = Field(
        default=None,
        description="Account level.",
    )
    rank: Any = Field(
        default=None,
        description="Ranked tier or position.",
    )
    kills: Any = Field(
        default=None,
        description="Total kill count.",
    )
    matches: Any = Field(
        default=None,
        description="Total matches played.",
    )
    kd: Any = Field(
        default=None,
        description="Kill/death ratio.",
    )


class PanelField(BaseModel):
    """A single labelled value inside the stats panel."""

    name: str
    value: str
    inline: bool = True


class StatsPanel(BaseModel):
    """Titled panel rendered in reply to a stats request."""

    title: str = Field(..., description="Panel title including the player's name or ID.")
    fields: list[PanelField] = Field(default_factory=list)
    color: int = Field(..., description="Accent color as a 0xRRGGBB integer.")
    footer: str
    timestamp: datetime
