"""
Wait operations
===============

- wait_until: resolve when a probe over an external resource first holds
"""

from .until import wait_until

__all__ = ("wait_until",)
