"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, HttpSettings, LogSettings, get_settings, parse_address

__all__ = ["AppSettings", "HttpSettings", "LogSettings", "get_settings", "parse_address"]
