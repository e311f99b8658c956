"""Single-trajectory discharge curve inputs."""

from pydantic import BaseModel, ConfigDict, Field

STRESS_NOISE_MULTIPLIER = 1.8
"""Noise multiplier applied by :meth:`DischargeConfig.stressed`."""


class DischargeConfig(BaseModel):
    """Continuous-time discharge of one battery with correlated noise."""

    model_config = ConfigDict(allow_inf_nan=False)

    duration_hours: float = Field(default=24.0, gt=0, description="Simulated wall-clock span (h)")
    drain_rate_per_hour: float = Field(default=4.0, ge=0, description="Deterministic drain (% per hour)")
    noise_amplitude: float = Field(default=1.0, ge=0, description="Noise scale (% per step)")
    correlation_tau_minutes: float = Field(
        default=30.0, gt=0,
        description="τ — correlation time of the noise. Per-step decay is exp(−Δt/τ).",
    )
    step_resolution_minutes: float = Field(default=5.0, gt=0, description="Δt between samples (min)")

    def stressed(self, factor: float = STRESS_NOISE_MULTIPLIER) -> "DischargeConfig":
        """Copy pushed into a more chaotic regime (noise amplitude × factor)."""
        return self.model_copy(update={"noise_amplitude": self.noise_amplitude * factor})
