"""Configuration module for conncheck.

- DEFAULT_ADDRESSES: Built-in probe targets
- Settings: Environment variable configuration
"""

from conncheck.config.defaults import DEFAULT_ADDRESSES
from conncheck.config.settings import Settings

__all__ = ["DEFAULT_ADDRESSES", "Settings"]
