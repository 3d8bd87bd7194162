"""Application bootstrap - wires configuration, logging, registry and service."""

from __future__ import annotations

from typing import Optional

from pattern_catalogue.config import AppConfig, ConfigurationManager
from pattern_catalogue.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalogue.infrastructure.registry.demo_registry import DemoRegistry, get_demo_registry


class Application:
    """Application context: configuration first, then logging, then the demo registry."""

    def __init__(self, config_path: Optional[str] = None, log_level: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self.log_level = log_level
        self._initialized = False

        # Defer heavy initialization until first use
        self._config_manager: Optional[ConfigurationManager] = None
        self._app_config: Optional[AppConfig] = None
        self._registry: Optional[DemoRegistry] = None
        self._service = None

        # Only create logger immediately (lightweight)
        self.logger = get_logger(__name__)

    def _ensure_config_manager(self) -> ConfigurationManager:
        """Ensure config manager is created (lazy initialization)."""
        if self._config_manager is None:
            self._config_manager = ConfigurationManager(self.config_path)
        return self._config_manager

    @property
    def config(self) -> AppConfig:
        if self._app_config is None:
            app_config = self._ensure_config_manager().get_app_config()
            if self.log_level:
                logging_config = app_config.logging.model_copy(update={"level": self.log_level.upper()})
                app_config = app_config.model_copy(update={"logging": logging_config})
            self._app_config = app_config
        return self._app_config

    def initialize(self) -> bool:
        """
        Initialize the application.

        Raises:
            ConfigurationError: If the configuration is invalid or a demo
                cannot be registered
        """
        if self._initialized:
            return True

        setup_logging(self.config.logging)

        from pattern_catalogue.application.demos import register_builtin_demos
        from pattern_catalogue.application.service import DemoApplicationService

        self._registry = register_builtin_demos(get_demo_registry())
        self._service = DemoApplicationService(self._registry, self.logger)

        self._initialized = True
        self.logger.info(
            "Pattern catalogue initialized",
            demos=len(self._registry),
            config_file=self.config_path,
        )
        return True

    def get_service(self):
        """Get the demo application service, initializing on first use."""
        if not self._initialized:
            self.initialize()
        return self._service

    @property
    def registry(self) -> DemoRegistry:
        if not self._initialized:
            self.initialize()
        return self._registry


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize an application."""
    app = Application(config_path, log_level)
    app.initialize()
    return app
