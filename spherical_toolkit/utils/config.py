"""
Configuration management using Pydantic for validation.

Holds solver tolerances, compass label tokens and the sphere radius
used by the command line front end.
"""
from pathlib import Path
from pydantic import BaseModel, Field, ValidationError
import yaml

from spherical_toolkit.utils.exceptions import ConfigurationError


class SolverParams(BaseModel):
    """Parameters for the bisection solver and bracket scanner."""
    eps: float = Field(1e-10, gt=0.0, description="Interval width at which bisection stops")
    scan_step: float = Field(0.1, gt=0.0, description="Step size for bracket scanning")


class CompassTokens(BaseModel):
    """Base tokens used to build octant labels."""
    north: str = Field("N", min_length=1)
    east: str = Field("E", min_length=1)
    south: str = Field("S", min_length=1)
    west: str = Field("W", min_length=1)


class ToolkitConfig(BaseModel):
    """Complete toolkit configuration."""
    sphere_radius_m: float = Field(6371000.0, gt=0.0, description="Sphere radius (meters)")
    solver: SolverParams = Field(default_factory=SolverParams)
    compass: CompassTokens = Field(default_factory=CompassTokens)


def load_config(config_path: Path) -> ToolkitConfig:
    """
    Load and validate configuration from YAML file.

    Missing sections fall back to their defaults.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated ToolkitConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If YAML is malformed or validation fails

    Example:
        >>> config = load_config(Path("config/french.yaml"))
        >>> config.compass.west
        'O'
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {config_path}: {e}") from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Config root must be a mapping: {config_path}")

    try:
        return ToolkitConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {config_path}: {e}") from e


def get_default_config() -> ToolkitConfig:
    """
    Get default configuration.

    Returns:
        Default ToolkitConfig
    """
    return ToolkitConfig()
