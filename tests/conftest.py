"""Pytest configuration and fixtures shared across all test modules.

Environment variables are set before any app import so the global settings
object is built with test values and no .env file is picked up.
"""

import os

# CRITICAL: Set these before any imports that might load settings
os.environ["APP_ENV"] = "testing"
os.environ.setdefault("FF_API_BASE", "https://stats.test")
os.environ.setdefault("FF_API_KEY", "test-api-key-123")
os.environ.setdefault("LOG_LEVEL", "WARNING")
