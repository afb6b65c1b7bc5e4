"""Configuration helpers for the server date formatter.

Exposes a single public function `load_config` that reads environment
variables and returns a typed, frozen `FormatterConfig` instance.
"""

from .env import FormatterConfig, load_config

__all__ = ["FormatterConfig", "load_config"]
