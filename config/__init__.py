"""Configuration module"""
from .loader import get_config, load_config, reset_config
from .match_tables import build_match_config, default_match_config

__all__ = ['get_config', 'load_config', 'reset_config', 'build_match_config', 'default_match_config']
