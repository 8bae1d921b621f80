"""
API Initialization Module.

This module contains initialization logic split into focused modules:
- logging: Logger configuration
- services: Counter store, rate limiter and moderation service wiring
"""

__all__ = []
