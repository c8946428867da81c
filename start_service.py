#!/usr/bin/env python3
"""
Startup script for Document File Service
"""

import logging

import uvicorn

from config.environment import config, setup_logging

logger = logging.getLogger(__name__)

def main():
    """Main startup routine"""
    setup_logging(config)
    logger.info("Starting %s", config.SERVICE_NAME)
    logger.info("Service URL: http://%s:%d", config.HOST, config.PORT)
    logger.info("API Documentation: http://%s:%d/docs", config.HOST, config.PORT)

    try:
        uvicorn.run("main:app", host=config.HOST, port=config.PORT,
                    log_level=config.get_logging_config("level").lower())
    except KeyboardInterrupt:
        logger.info("Service stopped by user")

if __name__ == "__main__":
    main()
