# Common utilities
from .config_loader import StoreConfig, load_store_config
from .log_config import setup_logging
