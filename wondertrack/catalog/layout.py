"""
==============================================================================
Layout Planner Module
==============================================================================

Card width planning for a category's card grid.

Policy:
-------
- 3 or more items: three cards per row, two gaps between them
- 2 items: two cards per row, one gap
- 0 or 1 item: one card spanning the full width

Larger counts still plan for three per row; the grid wraps the rest.

==============================================================================
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from wondertrack.core import exceptions


def card_width(item_count: int, available_width: float, gap: float) -> float:
    """
    Width of one card for a section holding item_count cards.

    Raises:
        AppException: VALIDATION_ERROR if item_count is negative
    """
    if item_count < 0:
        raise exceptions.validation_error(
            f"Item count cannot be negative: {item_count}",
            {"item_count": item_count}
        )

    if item_count >= 3:
        return (available_width - 2 * gap) / 3
    if item_count == 2:
        return (available_width - gap) / 2
    return available_width


class LayoutConfig(BaseModel):
    """Measured container dimensions used for one render."""

    model_config = ConfigDict(frozen=True)

    available_width: float = Field(default=875.0, gt=0)
    gap: float = Field(default=15.0, ge=0)
    min_card_width: float = Field(default=280.0, ge=0)
    card_height: float = Field(default=120.0, gt=0)

    @classmethod
    def from_settings(cls, settings) -> "LayoutConfig":
        return cls(
            available_width=settings.layout_available_width,
            gap=settings.layout_gap,
            min_card_width=settings.layout_min_card_width,
            card_height=settings.layout_card_height,
        )


class LayoutPlanner:
    """
    Applies the card width policy to one LayoutConfig.

    Example:
        >>> planner = LayoutPlanner(LayoutConfig(available_width=875, gap=15))
        >>> planner.plan(2)
        430.0
    """

    def __init__(self, config: LayoutConfig) -> None:
        self._config = config

    @property
    def config(self) -> LayoutConfig:
        return self._config

    def plan(self, item_count: int) -> float:
        """Planned width for each card in a section of item_count cards."""
        return card_width(item_count, self._config.available_width, self._config.gap)

    def clamp(self, width: float) -> float:
        """Apply the minimum card width floor."""
        return max(width, self._config.min_card_width)
