import logging
import logging.config
import os

import yaml

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(default_path=None, default_level=logging.INFO, env_key="LOG_CFG"):
    """
    Setup logging for hwid.
    Uses the `logging` section of a YAML file when present, basicConfig otherwise.
    """
    path = os.getenv(env_key, None) or default_path
    if isinstance(default_level, str):
        default_level = getattr(logging, default_level.upper(), logging.INFO)
    if not path or not os.path.exists(path):
        logging.basicConfig(level=default_level, format=_FORMAT)
        if path:
            logger.debug("Logging configuration not found: %s. Using defaults", path)
        return
    with open(path, "rt") as f:
        try:
            config = yaml.safe_load(f.read()) or {}
        except yaml.YAMLError as e:
            logging.basicConfig(level=default_level, format=_FORMAT)
            logger.warning("Error in logging configuration %s: %s. Using defaults", path, e)
            return
    if not (isinstance(config, dict) and "logging" in config):
        logging.basicConfig(level=default_level, format=_FORMAT)
        return
    try:
        logging.config.dictConfig(config["logging"])
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        logging.basicConfig(level=default_level, format=_FORMAT)
        logger.warning("Invalid logging section in %s: %s. Using defaults", path, e)


logger = logging.getLogger("hwid")
