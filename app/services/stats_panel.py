"""Presentation boundary: render stats as a reply panel or failure text.

This is the only place where missing stats become the "N/A" placeholder.
"""

from datetime import datetime, timezone
from typing import Any

from app.schemas.stats import PanelField, PlayerStats, StatsPanel

NOT_AVAILABLE = "N/A"
PANEL_COLOR = 0xFF0000
PANEL_FOOTER = "Data from Free Fire API"

# (label, PlayerStats attribute) in display order
PANEL_FIELDS: tuple[tuple[str, str], ...] = (
    ("Level", "level"),
    ("Rank", "rank"),
    ("Kills", "kills"),
    ("Matches", "matches"),
    ("K/D", "kd"),
)


def _display(value: Any) -> str:
    # Only a missing value is N/A; 0 and "" are real answers
    return NOT_AVAILABLE if value is None else str(value)


def build_stats_panel(
    player_id: str,
    stats: PlayerStats,
    *,
    now: datetime | None = None,
) -> StatsPanel:
    """Render a titled stats panel for ``player_id``.

    Args:
        player_id: Requested lookup key, used as the title fallback.
        stats: Fetched (or cached) stats record.
        now: Timestamp override; defaults to the current UTC time.

    Returns:
        StatsPanel: Title, five inline fields, color, footer and timestamp.
    """
    return StatsPanel(
        title=f"Free Fire Stats: {stats.username or player_id}",
        fields=[
            PanelField(name=label, value=_display(getattr(stats, attr)))
            for label, attr in PANEL_FIELDS
        ],
        color=PANEL_COLOR,
        footer=PANEL_FOOTER,
        timestamp=now or datetime.now(timezone.utc),
    )


def build_failure_message(player_id: str) -> str:
    """Plain-text reply used when stats could not be fetched."""
    return f"Could not get stats for ID: {player_id}"
