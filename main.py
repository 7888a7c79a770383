#!/usr/bin/env python3
"""
Main entry point untuk Temperature Monitoring System
Samples DS18B20 probes and serves /metrics, a dashboard and /health
"""

import logging
import sys

from config.settings import ConfigError, setup_logging
from core.monitor import TemperatureMonitor

logger = logging.getLogger(__name__)


def main():
    setup_logging()
    try:
        monitor = TemperatureMonitor()
    except ConfigError as e:
        logger.error(f"error loading config: {e}")
        return 1

    try:
        monitor.run()
    except OSError as e:
        logger.error(f"failed to start http server: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
