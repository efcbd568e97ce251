#!/usr/bin/env python3
"""
Retail Banking Ledger Entry Point

Starts the FastAPI server with the configured host, port and logging.
"""

import sys

from retail_banking.api import run_server
from retail_banking.config import get_config
from retail_banking.logging_config import setup_logging


if __name__ == "__main__":
    config = get_config()
    logger = setup_logging(config.log_level, config.log_format)

    try:
        run_server(host=config.api_host, port=config.api_port)
    except KeyboardInterrupt:
        logger.info("Shutting down")
    except Exception as e:
        logger.error(f"Error starting server: {e}")
        sys.exit(1)
