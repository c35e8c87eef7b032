"""Dependency injection container for clean component wiring."""
from typing import Any, Dict, Optional

from normviz.application.services.recompute_controller import RecomputeController
from normviz.domain.entities.state import ExplorerState
from normviz.domain.sources.uniform_source import UniformSource
from normviz.infrastructure.config.config_loader import LoggingConfig, RandomConfig
from normviz.shared.factories.source_factory import create_uniform_source


class Container:
    """Simple dependency injection container.

    Provides centralized component wiring and dependency management,
    following the Dependency Inversion Principle.
    """

    def __init__(self):
        """Initialize container with empty service registry."""
        self._services: Dict[str, Any] = {}
        self._configs: Dict[str, Any] = {}

    def register_configs(self, state: ExplorerState,
                         random_config: Optional[RandomConfig] = None,
                         logging_config: Optional[LoggingConfig] = None) -> None:
        """Register configuration objects.

        Args:
            state: Initial explorer inputs
            random_config: Seed settings (defaults to unseeded)
            logging_config: Logging settings (defaults to INFO on the console)
        """
        self._configs.update({
            'state': state,
            'random': random_config or RandomConfig(),
            'logging': logging_config or LoggingConfig()
        })

    def get_uniform_source(self) -> UniformSource:
        """Get uniform source instance (singleton pattern)."""
        if 'uniform_source' not in self._services:
            random_config = self._configs.get('random') or RandomConfig()
            self._services['uniform_source'] = create_uniform_source(random_config.seed)
        return self._services['uniform_source']

    def get_controller(self) -> RecomputeController:
        """Get recompute controller instance (singleton pattern)."""
        if 'controller' not in self._services:
            if 'state' not in self._configs:
                raise ValueError("Explorer state not registered")
            self._services['controller'] = RecomputeController(
                source=self.get_uniform_source(),
                state=self._configs['state']
            )
        return self._services['controller']

    def get_config(self, config_name: str) -> Any:
        """Get registered configuration by name.

        Args:
            config_name: Name of configuration ('state', 'random', 'logging')

        Returns:
            Configuration object

        Raises:
            KeyError: If configuration not found
        """
        if config_name not in self._configs:
            raise KeyError(f"Configuration '{config_name}' not registered")
        return self._configs[config_name]

    def clear_services(self) -> None:
        """Clear service registry (useful for testing)."""
        self._services.clear()
