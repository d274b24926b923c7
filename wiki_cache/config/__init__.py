"""Cache configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_raw_config
from .cache import CacheSettings

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=logging.INFO)

_RAW_CONFIG = load_raw_config()

cache = CacheSettings(_RAW_CONFIG)


class Config:
    cache = cache


__all__ = ["cache", "Config", "CacheSettings", "load_raw_config"]
