from .config_loader import load_config, runtime_config
from .logger import get_logger

__all__ = ["load_config", "runtime_config", "get_logger"]
