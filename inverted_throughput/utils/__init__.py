"""
Utility functions for the inverted-throughput package
"""

from .system_info import get_system_info

__all__ = [
    'get_system_info',
]
