"""Top-level scenario — bundles every lab input."""

from pydantic import BaseModel, Field

from battery_lab.config.lifetime import LifetimeConfig
from battery_lab.config.discharge import DischargeConfig


class SimulationConfig(BaseModel):
    """Run-level settings shared by both experiments."""

    random_seed: int | None = Field(
        default=None,
        ge=0,
        description="Optional RNG seed for reproducible runs. None = non-deterministic.",
    )


class Scenario(BaseModel):
    """Complete input bundle for one lab session."""

    lifetime: LifetimeConfig = Field(default_factory=LifetimeConfig)
    discharge: DischargeConfig = Field(default_factory=DischargeConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
