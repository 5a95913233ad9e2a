"""Infrastructure adapters implementing application ports."""

from audit_catalog.infrastructure.adapters.github_listing import (
    GitHubContentsListingAdapter,
)

__all__: list[str] = ["GitHubContentsListingAdapter"]
