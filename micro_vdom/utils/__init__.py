"""
Utility modules for the tree builder.
"""

from micro_vdom.utils.config import Config, default_config
from micro_vdom.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'default_config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
