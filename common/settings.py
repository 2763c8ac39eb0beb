import logging
import os
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, ValidationError


class InputCfg(BaseModel):
    path: str = "data/regions.csv"
    output_columns: List[str] = Field(default_factory=lambda: ["output"])
    population_column: str = "population"

    @field_validator("output_columns")
    @classmethod
    def must_name_a_column(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("at least one output column is required")
        return v


class OutputCfg(BaseModel):
    path: Optional[str] = None
    precision: int = Field(default=4, ge=0, le=17)


class LoggingCfg(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        name = v.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {v!r}")
        return name


class Settings(BaseModel):
    input: InputCfg = InputCfg()
    output: OutputCfg = OutputCfg()
    logging: LoggingCfg = LoggingCfg()


def load_settings(path: str = "config.yaml") -> Settings:
    import yaml
    cfg = {}
    if os.path.exists(path):
        with open(path, "r") as f:
            cfg = yaml.safe_load(f) or {}

    # allow pointing at another table via env at runtime
    env_input = os.environ.get("HOOVER_INPUT_OVERRIDE")
    if env_input:
        cfg.setdefault("input", {})
        cfg["input"]["path"] = env_input

    try:
        return Settings.model_validate(cfg)
    except ValidationError as e:
        raise RuntimeError(f"Configuration error in {path}: {e}") from e
