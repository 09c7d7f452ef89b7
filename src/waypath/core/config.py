"""
Configuration management for Waypath.

Handles loading and validation of limit profiles (how fast a robot may drive)
and named paths (which waypoints it drives through) from YAML files.

Directory layout::

    config/
        profiles/<name>.yaml
        paths/<name>.yaml
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from waypath.core.exceptions import ConfigurationError
from waypath.geometry.pose import Pose2d
from waypath.path.sampler import DEFAULT_MAX_DTHETA, DEFAULT_MAX_DX, DEFAULT_MAX_DY


class RegionConfig(BaseModel):
    """Rectangular slow-down region."""

    min_corner: tuple[float, float]
    max_corner: tuple[float, float]
    velocity_limit: float = Field(ge=0.0)


class LimitsConfig(BaseModel):
    """Kinematic limits and boundary velocities for a robot."""

    name: str = "default"
    max_velocity: float = Field(gt=0.0)
    max_acceleration: float = Field(gt=0.0)
    max_deceleration: float | None = Field(default=None, gt=0.0)
    max_centripetal_acceleration: float | None = Field(default=None, gt=0.0)
    start_velocity: float = Field(default=0.0, ge=0.0)
    end_velocity: float = Field(default=0.0, ge=0.0)
    regions: list[RegionConfig] = Field(default_factory=list)


class SamplingConfig(BaseModel):
    """Adaptive sampling thresholds."""

    max_dx: float = Field(default=DEFAULT_MAX_DX, gt=0.0)
    max_dy: float = Field(default=DEFAULT_MAX_DY, gt=0.0)
    max_dtheta_deg: float = Field(default=math.degrees(DEFAULT_MAX_DTHETA), gt=0.0)

    @property
    def max_dtheta(self) -> float:
        return math.radians(self.max_dtheta_deg)


class WaypointConfig(BaseModel):
    """Waypoint with heading in degrees."""

    x: float
    y: float
    heading_deg: float = 0.0

    def to_pose(self) -> Pose2d:
        return Pose2d.from_degrees(self.x, self.y, self.heading_deg)


class PathConfig(BaseModel):
    """Named path definition."""

    name: str
    waypoints: list[WaypointConfig] = Field(min_length=2)
    reversed: bool = False
    profile: str | None = None

    def poses(self) -> list[Pose2d]:
        return [waypoint.to_pose() for waypoint in self.waypoints]


class GeneratorConfig(BaseModel):
    """Everything the trajectory generator needs besides the waypoints."""

    limits: LimitsConfig
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    reversed: bool = False

    @model_validator(mode="after")
    def _check_boundary_velocities(self) -> "GeneratorConfig":
        for name in ("start_velocity", "end_velocity"):
            if getattr(self.limits, name) > self.limits.max_velocity:
                raise ValueError(f"{name} exceeds max_velocity")
        return self


def _read_yaml(config_file: Path) -> Any:
    with open(config_file) as f:
        return yaml.safe_load(f)


@dataclass
class ConfigManager:
    """
    Central configuration manager for Waypath.

    Loads and validates limit profiles and paths from YAML files.

    Example:
        >>> config = ConfigManager(config_dir=Path("config"))
        >>> path = config.get_path("s_curve")
        >>> generator_config = config.generator_config("s_curve")
    """

    config_dir: Path
    _profiles: dict[str, LimitsConfig] = field(default_factory=dict, init=False)
    _paths: dict[str, PathConfig] = field(default_factory=dict, init=False)
    _sampling: SamplingConfig = field(default_factory=SamplingConfig, init=False)
    _loaded: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.config_dir = Path(self.config_dir)
        if not self.config_dir.exists():
            raise ConfigurationError(
                f"Configuration directory not found: {self.config_dir}"
            )

    def load(self) -> None:
        """Load all configurations from disk."""
        self._load_sampling()
        self._load_profiles()
        self._load_paths()
        self._loaded = True

    def _load_sampling(self) -> None:
        """Load optional ``sampling.yaml`` overrides."""
        config_file = self.config_dir / "sampling.yaml"
        if not config_file.exists():
            return
        try:
            data = _read_yaml(config_file) or {}
            self._sampling = SamplingConfig(**data.get("sampling", data))
        except (yaml.YAMLError, ValidationError, AttributeError) as e:
            raise ConfigurationError(
                f"Failed to load sampling config: {config_file}",
                details={"error": str(e)},
            )

    def _load_profiles(self) -> None:
        """Load limit profiles."""
        profiles_dir = self.config_dir / "profiles"
        if not profiles_dir.exists():
            return

        for config_file in sorted(profiles_dir.glob("*.yaml")):
            try:
                data = _read_yaml(config_file)
                if data and "limits" in data:
                    profile_data = dict(data["limits"])
                    profile_data.setdefault("name", config_file.stem)
                    if "regions" in data:
                        profile_data["regions"] = data["regions"]
                    self._profiles[config_file.stem] = LimitsConfig(**profile_data)
            except (yaml.YAMLError, ValidationError) as e:
                raise ConfigurationError(
                    f"Failed to load profile config: {config_file}",
                    details={"error": str(e)},
                )

    def _load_paths(self) -> None:
        """Load path definitions."""
        paths_dir = self.config_dir / "paths"
        if not paths_dir.exists():
            return

        for config_file in sorted(paths_dir.glob("*.yaml")):
            try:
                data = _read_yaml(config_file)
                if data and "path" in data:
                    path_data = dict(data["path"])
                    path_data.setdefault("name", config_file.stem)
                    if "waypoints" in data:
                        path_data["waypoints"] = data["waypoints"]
                    self._paths[config_file.stem] = PathConfig(**path_data)
            except (yaml.YAMLError, ValidationError) as e:
                raise ConfigurationError(
                    f"Failed to load path config: {config_file}",
                    details={"error": str(e)},
                )

    def get_profile(self, name: str) -> LimitsConfig:
        """
        Get a limit profile by name.

        Args:
            name: Profile name (without .yaml extension)

        Raises:
            ConfigurationError: If the profile is not found
        """
        if not self._loaded:
            self.load()

        if name not in self._profiles:
            raise ConfigurationError(
                f"Profile configuration not found: {name}",
                details={"available": list(self._profiles.keys())},
            )
        return self._profiles[name]

    def get_path(self, name: str) -> PathConfig:
        """
        Get a path definition by name.

        Args:
            name: Path name (without .yaml extension)

        Raises:
            ConfigurationError: If the path is not found
        """
        if not self._loaded:
            self.load()

        if name not in self._paths:
            raise ConfigurationError(
                f"Path configuration not found: {name}",
                details={"available": list(self._paths.keys())},
            )
        return self._paths[name]

    def list_profiles(self) -> list[str]:
        """List available limit profiles."""
        if not self._loaded:
            self.load()
        return list(self._profiles.keys())

    def list_paths(self) -> list[str]:
        """List available paths."""
        if not self._loaded:
            self.load()
        return list(self._paths.keys())

    def generator_config(self, path_name: str, profile: str | None = None) -> GeneratorConfig:
        """
        Combine a path with its limit profile.

        Args:
            path_name: Path to generate
            profile: Profile name; defaults to the path's own ``profile``
                entry, then to ``"default"``

        Raises:
            ConfigurationError: If either is missing or they are inconsistent
        """
        path = self.get_path(path_name)
        limits = self.get_profile(profile or path.profile or "default")
        try:
            return GeneratorConfig(limits=limits, sampling=self._sampling, reversed=path.reversed)
        except ValidationError as e:
            raise ConfigurationError(
                f"Inconsistent configuration for path: {path_name}",
                details={"error": str(e)},
            )
