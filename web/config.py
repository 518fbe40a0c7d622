"""Environment settings and run configuration."""

from dataclasses import dataclass, field

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from metrics.config import DEFAULT_PLANNING, PlanningDefaults

INTERVALS_BASE_URL = "https://intervals.icu/api/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    intervals_api_key: str = Field(default="", validation_alias="INTERVALS_API_KEY")
    intervals_athlete_id: str = Field(default="", validation_alias="INTERVALS_ATHLETE_ID")
    intervals_base_url: str = Field(default=INTERVALS_BASE_URL, validation_alias="INTERVALS_BASE_URL")
    target_field: str = Field(default="TageszielTSS", validation_alias="INTERVALS_TARGET_FIELD")
    weekly_target_field: str = Field(default="WochenzielTSS", validation_alias="INTERVALS_WEEKLY_TARGET_FIELD")
    plan_field: str = Field(default="Trainingstage", validation_alias="INTERVALS_PLAN_FIELD")
    day_type_field: str = Field(default="TagesTyp", validation_alias="INTERVALS_DAY_TYPE_FIELD")
    decoupling_field: str = Field(default="Decoupling", validation_alias="INTERVALS_DECOUPLING_FIELD")
    pdc_field: str = Field(default="PDC", validation_alias="INTERVALS_PDC_FIELD")
    simulation_weeks: int = Field(default=DEFAULT_PLANNING.horizon_weeks, validation_alias="SIMULATION_WEEKS")
    write_daily_target: bool = Field(default=False, validation_alias="WRITE_DAILY_TARGET")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    def to_target_config(self) -> "TargetConfig":
        return TargetConfig(
            api_key=self.intervals_api_key,
            athlete_id=self.intervals_athlete_id,
            base_url=self.intervals_base_url,
            fields=FieldNames(
                daily_target=self.target_field,
                weekly_target=self.weekly_target_field,
                plan=self.plan_field,
                day_type=self.day_type_field,
                decoupling=self.decoupling_field,
                pdc=self.pdc_field,
            ),
            planning=PlanningDefaults(horizon_weeks=self.simulation_weeks),
            write_daily_target=self.write_daily_target,
        )


@dataclass(frozen=True)
class FieldNames:
    """Custom wellness field names in the athlete's intervals.icu account."""

    daily_target: str = "TageszielTSS"
    weekly_target: str = "WochenzielTSS"
    plan: str = "Trainingstage"
    day_type: str = "TagesTyp"
    decoupling: str = "Decoupling"
    pdc: str = "PDC"


@dataclass(frozen=True)
class TargetConfig:
    """Everything a target run needs, passed explicitly to the orchestrator."""

    api_key: str
    athlete_id: str
    base_url: str = INTERVALS_BASE_URL
    fields: FieldNames = field(default_factory=FieldNames)
    planning: PlanningDefaults = DEFAULT_PLANNING
    write_daily_target: bool = False

    def missing(self) -> list[str]:
        """Names of required settings that are empty."""
        missing = []
        if not self.api_key:
            missing.append("INTERVALS_API_KEY")
        if not self.athlete_id:
            missing.append("INTERVALS_ATHLETE_ID")
        return missing


def get_settings() -> Settings:
    """Load settings from the environment (and .env, if present)."""
    return Settings()
