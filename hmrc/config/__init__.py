"""Configuration module for the HMRC test user client."""
from .settings import AppConfig, load_settings

__all__ = ["AppConfig", "load_settings"]
