"""Validated game options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from term_snake.colors import AVAILABLE_COLORS


class SnakeOptions(BaseModel):
    """User-facing game configuration.

    Invalid values raise :class:`pydantic.ValidationError` on
    construction, so a game never starts with a bad configuration.
    ``rows``/``columns`` of ``None`` mean "use the terminal size".
    """

    model_config = ConfigDict(frozen=True)

    update_interval: int = Field(default=100, gt=0)
    snake_head_color: str = "red"
    snake_body_color: str = "blue"
    empty_color: str = "black"
    fruit_color: str = "green"
    fill_char: str = Field(default=" ", min_length=1, max_length=1)
    rows: int | None = Field(default=None, gt=0)
    columns: int | None = Field(default=None, gt=0)

    @field_validator(
        "snake_head_color", "snake_body_color", "empty_color", "fruit_color",
    )
    @classmethod
    def _known_color(cls, value: str) -> str:
        if value not in AVAILABLE_COLORS:
            raise ValueError(f"invalid color name: {value!r}")
        return value

    @property
    def update_interval_s(self) -> float:
        """Tick interval in seconds."""
        return self.update_interval / 1000.0
