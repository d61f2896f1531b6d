"""
Utility modules for the contracts API
"""
from .config_loader import load_app_config, AppConfig

__all__ = [
    'load_app_config',
    'AppConfig',
]
