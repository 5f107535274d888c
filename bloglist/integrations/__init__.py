"""
Third-party integrations.
"""

from bloglist.integrations.sentry import init_sentry

__all__ = [
    "init_sentry",
]
