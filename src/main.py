"""feedbackDesk application entry point.

Configures structured logging from :class:`Settings` and forces the
one-time initialization of the process-wide data service, so a bad
configuration (e.g. an unavailable digest algorithm) stops the process
before the first prompt is shown.

Run the interactive console with ``python -m src.cli``.
"""

from __future__ import annotations

import structlog

from src.config.settings import Settings
from src.services.data_service import DataService, get_data_service
from src.utils.logging import configure_logging, get_logger

__version__ = "0.1.0"


def bootstrap(settings: Settings | None = None, json_logs: bool = False) -> DataService:
    """Configure logging and return the initialized data service.

    Raises:
        ConfigurationError: If the data service cannot be initialized.
    """
    app_settings = settings or Settings()

    configure_logging(
        log_level=app_settings.log_level,
        json_output=json_logs or app_settings.app_env == "production",
    )
    logger: structlog.BoundLogger = get_logger(__name__)

    service = get_data_service(app_settings)

    logger.info(
        "app_startup",
        version=__version__,
        environment=app_settings.app_env,
        users=len(service.get_users()),
        forms=len(service.get_forms()),
    )
    return service


if __name__ == "__main__":
    from src.cli.console import main

    raise SystemExit(main())
