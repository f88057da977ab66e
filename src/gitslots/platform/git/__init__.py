"""Git-backed source listing."""

from .listing import GitListing, suffix_filter

__all__ = ["GitListing", "suffix_filter"]
