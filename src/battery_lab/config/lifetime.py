"""Population lifetime study inputs."""

from pydantic import BaseModel, ConfigDict, Field

from battery_lab.config.noise import NoiseSpec


class LifetimeConfig(BaseModel):
    """Inputs for the white-vs-colored Monte-Carlo lifetime study.

    Defaults are the lab's reset preset.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    # --- Degradation ---
    base_drain_per_step: float = Field(
        default=1.5, ge=0,
        description="Deterministic health loss per cycle (%)",
    )
    fail_threshold: float = Field(
        default=0.0,
        description="Health (%) at or below which a cell counts as failed. "
                    "Negative values are unreachable: every run is censored.",
    )
    max_steps: int = Field(default=1_200, ge=1, description="Cycle budget per cell")

    # --- Noise ---
    noise_amplitude: float = Field(default=2.0, ge=0, description="Noise scale (% per cycle)")
    correlation: float = Field(
        default=0.8, ge=-1.0, lt=1.0,
        description="ρ for the colored regime",
    )

    # --- Population ---
    unit_count: int = Field(default=340, ge=1, description="Cells simulated per noise regime")
    histogram_bins: int = Field(default=12, ge=1, description="Lifetime histogram bin count")

    def white_noise(self) -> NoiseSpec:
        return NoiseSpec(mode="white", amplitude=self.noise_amplitude, correlation=self.correlation)

    def colored_noise(self) -> NoiseSpec:
        return NoiseSpec(mode="colored", amplitude=self.noise_amplitude, correlation=self.correlation)
