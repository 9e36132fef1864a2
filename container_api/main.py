"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the HTTP service.
"""

import logging

from container_api.bootstrap import bootstrap_create_server
from container_api.config import SettingsLoadError, config_configure_logging, config_load_settings
from container_api.server import ServerStartupError, server_run

logger = logging.getLogger(__name__)


def main() -> None:
    """Load settings, configure logging and serve until terminated.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration is invalid or the listener cannot start.
    """

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        config_configure_logging()
        logger.error("%s", error)
        raise SystemExit(1) from error

    config_configure_logging(log_level=settings.log_level, log_format=settings.log_format)
    logger.info("Starting service in %s environment", settings.environment_name)

    server = bootstrap_create_server(settings)
    try:
        server_run(server)
    except ServerStartupError as error:
        logger.error("%s on %s:%d", error, settings.application_host, settings.application_port)
        raise SystemExit(1) from error


if __name__ == "__main__":
    main()
