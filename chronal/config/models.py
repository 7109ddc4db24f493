"""Pydantic configuration model with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChronalConfig(BaseModel):
    """Library-wide defaults, frozen after construction."""

    model_config = {"frozen": True, "extra": "forbid"}

    # Template used by str(Moment)
    default_format: str = "Y-m-d H:i:s"

    # Forwarded to dateutil.parser.parse
    parser_dayfirst: bool = False
    parser_yearfirst: bool = False
    parser_fuzzy: bool = False

    # Two digit years ("y" token) below the pivot are 20xx, others 19xx
    two_digit_year_pivot: int = Field(default=70, ge=0, le=100)
