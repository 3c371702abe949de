from .json_values import reject_constant, to_json_value
from .logging_config import setup_logging

__all__ = ["reject_constant", "to_json_value", "setup_logging"]
