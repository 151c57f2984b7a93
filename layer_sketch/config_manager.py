import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"

def load_config(path=None):
    config_path = path or os.path.join(os.path.dirname(os.path.abspath(__file__)), CONFIG_FILE)
    try:
        with open(config_path, 'r') as file:
            return json.load(file)

    except FileNotFoundError:
        logger.error("Config file not found: %s", config_path)
        raise
    except json.JSONDecodeError as e:
        logger.error("Config file is not valid JSON (%s): %s", config_path, e)
        raise

CONFIG = load_config()
