"""
Entry point for running the CRM API.

This module loads ``config.json`` (or the file named by ``CRM_CONFIG``),
builds the application and starts the multithreaded development
server. A configuration or database failure at startup ends the
process with exit code 1. In production, a WSGI server should import
``app`` from ``wsgi`` and serve it instead.
"""

from __future__ import annotations

import logging
import os
import sys

from crm_api import create_app, db
from crm_api.config import config_path_from_env, load_config
from crm_api.errors import ConfigError, DatabaseConnectionError

logger = logging.getLogger("crm_api")


def main() -> int:
    logging.basicConfig(
        level=os.environ.get("CRM_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config(config_path_from_env())
    except ConfigError as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1
    try:
        app = create_app(config)
    except DatabaseConnectionError as exc:
        logger.error("%s", exc)
        return 1

    # Only create missing tables in local development. Production
    # schemas are managed outside this service.
    with app.app_context():
        db.create_all()
    app.run(host=config.server.host, port=config.server.port, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
