"""Configuration management infrastructure - Type-safe YAML configuration loading."""
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel

from normviz.domain.entities.dimensions import Dimensions
from normviz.domain.entities.init_config import InitConfig
from normviz.domain.entities.norm_type import NormType
from normviz.domain.entities.state import ExplorerState

logger = logging.getLogger(__name__)


class DimensionsConfig(BaseModel):
    """Raw dimensions; clamped into range when converted to the domain entity."""
    m: float = 8
    k: float = 8
    n: float = 8

    class Config:
        """Pydantic configuration."""
        validate_assignment = True


class InitSettings(BaseModel):
    """Initialization settings for one matrix."""
    init_type: str = "xavier"
    mean: float = 0.0
    std: float = 0.0
    constant: float = 0.0
    scale: float = 1.0

    class Config:
        """Pydantic configuration."""
        validate_assignment = True


class RandomConfig(BaseModel):
    """Randomness configuration with validation."""
    seed: Optional[int] = None

    class Config:
        """Pydantic configuration."""
        validate_assignment = True


class LoggingConfig(BaseModel):
    """Logging configuration with validation."""
    level: str = "INFO"
    log_file: Optional[str] = None

    class Config:
        """Pydantic configuration."""
        validate_assignment = True

    @property
    def level_number(self) -> int:
        """Numeric logging level, INFO for unknown names."""
        level = logging.getLevelName(self.level.upper())
        return level if isinstance(level, int) else logging.INFO


class ConfigLoader:
    """YAML configuration loader with validation and type safety.

    Every section is optional; missing sections and fields fall back to the
    explorer defaults (8×8×8 Xavier matrices, RMS norm, unseeded).
    """

    def __init__(self, config_path: Path):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = config_path

    def load_dimensions(self) -> Dimensions:
        """Load dimensions, clamping out-of-range values."""
        config_data = self._load_yaml()
        settings = DimensionsConfig(**(config_data.get('dimensions') or {}))
        dims = Dimensions.from_raw(settings.m, settings.k, settings.n)
        if (dims.m, dims.k, dims.n) != (settings.m, settings.k, settings.n):
            logger.warning("Dimensions %s clamped to %s", settings.model_dump(), dims.to_dict())
        return dims

    def load_init_config(self, section: str) -> InitConfig:
        """Load the initialization config of 'matrix_a' or 'matrix_b'."""
        config_data = self._load_yaml()
        settings = InitSettings(**(config_data.get(section) or {}))
        init_config = InitConfig(**settings.model_dump())
        if not init_config.is_recognized:
            logger.warning("Unknown init_type %r in %s; matrix will be zero-filled",
                           init_config.init_type, section)
        return init_config

    def load_norm_type(self) -> NormType:
        """Load and validate the selected norm type."""
        config_data = self._load_yaml()
        return NormType.parse(config_data.get('norm_type') or NormType.RMS)

    def load_random_config(self) -> RandomConfig:
        """Load and validate randomness configuration."""
        config_data = self._load_yaml()
        return RandomConfig(**(config_data.get('random') or {}))

    def load_logging_config(self) -> LoggingConfig:
        """Load and validate logging configuration."""
        config_data = self._load_yaml()
        return LoggingConfig(**(config_data.get('logging') or {}))

    def load_initial_state(self) -> ExplorerState:
        """Assemble the explorer state described by the file."""
        return ExplorerState(
            dims=self.load_dimensions(),
            config_a=self.load_init_config('matrix_a'),
            config_b=self.load_init_config('matrix_b'),
            norm_type=self.load_norm_type()
        )

    def load_all_configs(self) -> Dict[str, Any]:
        """Load all configurations at once."""
        return {
            'state': self.load_initial_state(),
            'random': self.load_random_config(),
            'logging': self.load_logging_config()
        }

    def _load_yaml(self) -> Dict[str, Any]:
        """Load raw YAML data with error handling."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Configuration file must contain a mapping at the top level")
        return data

    def validate_config_file(self) -> bool:
        """Validate that configuration file can be loaded and parsed."""
        try:
            self._load_yaml()
            return True
        except (FileNotFoundError, ValueError):
            return False

    def get_config_schema(self) -> Dict[str, Any]:
        """Get configuration schema for documentation."""
        return {
            'dimensions': DimensionsConfig.__annotations__,
            'matrix_a': InitSettings.__annotations__,
            'matrix_b': InitSettings.__annotations__,
            'norm_type': [t.value for t in NormType],
            'random': RandomConfig.__annotations__,
            'logging': LoggingConfig.__annotations__
        }
