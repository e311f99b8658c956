"""Noise process configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class NoiseSpec(BaseModel):
    """One noise regime: independent per step, or AR(1)-correlated."""

    model_config = ConfigDict(allow_inf_nan=False)

    mode: Literal["white", "colored"] = Field(
        default="white",
        description="'white' = i.i.d. per step; 'colored' = first-order autoregressive",
    )
    amplitude: float = Field(default=2.0, ge=0, description="Scale of one noise sample (% health per step)")
    correlation: float = Field(
        default=0.8, ge=-1.0, lt=1.0,
        description="ρ — step-to-step correlation of the colored innovation. Ignored in white mode.",
    )
