"""YAML schema validation and config loading.

Provides centralized validation for configuration files using pydantic:
    - Vectorize schema (vectorize.v1.yaml): file extensions, collinear
      collapse mode, worker pool, logging

All entrypoints load configs through these validators for fail-fast error
detection with actionable messages (offending keys, expected ranges).

Usage:
    from raster2svg.utils import validators

    cfg = validators.load_vectorize_config("configs/vectorize_v1.yaml")
    cfg = validators.default_vectorize_config()
"""

from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# VECTORIZE SCHEMA V1
# ============================================================================

class LoggingSettings(BaseModel):
    """Logging options forwarded to logging_config.setup_logging()."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Root logging level"
    )
    file: Optional[str] = Field(None, description="Log file path, null for console only")
    json_format: bool = Field(False, alias="json", description="Emit JSON lines")
    color: bool = Field(True, description="ANSI colors on a TTY console")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class VectorizeV1(BaseModel):
    """Vectorize schema v1 (batch PNG → SVG conversion)."""
    schema_version: str = Field("vectorize.v1", alias="schema", description="Schema version")
    raster_ext: str = Field(".png", description="Input file extension, including the dot")
    vector_ext: str = Field(".svg", description="Output file extension, including the dot")
    keep_every_point: bool = Field(
        False, description="Keep every lattice point instead of collapsing straight runs"
    )
    workers: Optional[int] = Field(None, ge=1, le=512, description="Pool size, null for CPU count")
    pool: Literal["thread", "process"] = Field("thread", description="Worker pool kind")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "vectorize.v1":
            raise ValueError(f"Expected schema 'vectorize.v1', got '{v}'")
        return v

    @field_validator('raster_ext', 'vector_ext')
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if len(v) < 2 or not v.startswith('.') or '/' in v:
            raise ValueError(f"Extension must look like '.png', got '{v}'")
        return v.lower()


# ============================================================================
# PUBLIC API
# ============================================================================

def default_vectorize_config() -> VectorizeV1:
    """Return the built-in vectorize configuration."""
    return VectorizeV1()


def load_vectorize_config(path: Union[str, Path]) -> VectorizeV1:
    """Load and validate vectorize config from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to vectorize.v1 YAML file

    Returns
    -------
    VectorizeV1
        Validated vectorize configuration

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (with actionable error message)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Vectorize config not found: {path}")

    data = fs.load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Vectorize config at {path} must be a mapping, got {type(data).__name__}")
    try:
        return VectorizeV1(**data)
    except Exception as e:
        raise ValueError(f"Vectorize config validation failed at {path}: {e}") from e
