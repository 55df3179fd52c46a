"""Application configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_raw_config
from .core import Core
from .downloader import Downloader
from .menu import Menu

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=logging.INFO)
# Quiet whatsmeow internals (reconnects, websocket teardown, app state)
logging.getLogger("whatsmeow").setLevel(logging.ERROR)
logging.getLogger("Whatsmeow").setLevel(logging.ERROR)

_RAW_CONFIG = load_raw_config()

core = Core(_RAW_CONFIG)
downloader = Downloader(_RAW_CONFIG)
menu = Menu(_RAW_CONFIG)


class Config:
    core = core
    downloader = downloader
    menu = menu


__all__ = ["core", "downloader", "menu", "Config"]
