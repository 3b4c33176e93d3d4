from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Radius expansion (km)
    fallback_radius_km: float = Field(default=25.0, gt=0)
    history_radius_factor: float = Field(default=1.25, gt=0)
    radius_growth_factor: float = Field(default=1.5, gt=1)
    radius_ceiling_km: float = Field(default=4500.0, gt=0)
    min_expansion_radius_km: float = Field(default=1.0, gt=0)

    # Nearby-user enrichment
    nearby_user_radius_km: float = Field(default=5.0, gt=0)

    # App
    default_limit: int = Field(default=5, ge=1)
    data_dir: Path = Path("data")
    log_level: str = "INFO"


settings = Settings()
