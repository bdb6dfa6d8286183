"""Domain policies package."""

from .restrictions import is_restricted, restricted_prefixes

__all__ = ["is_restricted", "restricted_prefixes"]
