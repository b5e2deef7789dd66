#!/usr/bin/env python3
"""
Flask REST API for the album AI proxy.

Uses environment variables for configuration (.env / .env.local are loaded
for local development).
"""
import logging

from album_gallery.config_loader import load_config_from_env
from album_gallery.web import create_app

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

config = load_config_from_env()
app = create_app(config)


if __name__ == "__main__":
    logger.info(f"AI API listening on http://{config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=False)
