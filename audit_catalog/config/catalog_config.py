"""Audit catalog configuration.

Defines where the remote audit listing lives and how it is interpreted,
with environment variable overrides for deployment.

Environment Variables:
- AUDIT_LISTING_OWNER: Repository owner (default: Lefgk)
- AUDIT_LISTING_REPO: Repository name (default: StoneWall)
- AUDIT_LISTING_BRANCH: Branch to list (default: main)
- AUDIT_LISTING_PATH: Directory holding the reports (default: audits)
- AUDIT_LISTING_API_HOST: Contents API host (default: api.github.com)
- AUDIT_DOCUMENT_EXTENSION: Report file suffix, case-sensitive (default: .pdf)
- AUDIT_LISTING_TIMEOUT: Request timeout in seconds (default: transport default)
- AUDIT_DEDUPLICATE: Drop records sharing a document URL (default: true)
- AUDIT_CURATED_PATH: YAML file replacing the packaged curated list (default: unset)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable, treating blank as unset."""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_optional_float_env(key: str) -> float | None:
    """Get float environment variable, None if unset or invalid."""
    value = os.environ.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable ("true"/"false", case-insensitive)."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class CatalogConfig:
    """Configuration for the remote listing and the merge policy.

    Attributes:
        owner: Owner of the repository holding the reports.
        repo: Repository holding the reports.
        branch: Branch (ref) to list.
        path: Directory inside the repository.
        api_host: Host of the contents API.
        document_extension: Suffix a file needs to become a record.
        timeout_seconds: Request timeout; None keeps the transport default.
        deduplicate: Drop later records sharing a document_url.
        curated_path: YAML file replacing the packaged curated catalog.
    """

    owner: str = "Lefgk"
    repo: str = "StoneWall"
    branch: str = "main"
    path: str = "audits"
    api_host: str = "api.github.com"
    document_extension: str = ".pdf"
    timeout_seconds: float | None = None
    deduplicate: bool = True
    curated_path: Path | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        for name in ("owner", "repo", "branch", "api_host"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")
        if not self.document_extension.startswith("."):
            raise ValueError(
                f"document_extension must start with '.', got {self.document_extension!r}"
            )
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )

    @property
    def listing_url(self) -> str:
        """Contents API URL of the report directory, including the ref."""
        path = quote(self.path.strip("/"))
        return (
            f"https://{self.api_host}/repos/{quote(self.owner)}/{quote(self.repo)}"
            f"/contents/{path}?ref={quote(self.branch)}"
        )

    @classmethod
    def from_environment(cls) -> "CatalogConfig":
        """Create config from environment variables with defaults."""
        defaults = cls()
        curated = os.environ.get("AUDIT_CURATED_PATH")
        return cls(
            owner=_get_str_env("AUDIT_LISTING_OWNER", defaults.owner),
            repo=_get_str_env("AUDIT_LISTING_REPO", defaults.repo),
            branch=_get_str_env("AUDIT_LISTING_BRANCH", defaults.branch),
            path=_get_str_env("AUDIT_LISTING_PATH", defaults.path),
            api_host=_get_str_env("AUDIT_LISTING_API_HOST", defaults.api_host),
            document_extension=_get_str_env(
                "AUDIT_DOCUMENT_EXTENSION", defaults.document_extension
            ),
            timeout_seconds=_get_optional_float_env("AUDIT_LISTING_TIMEOUT"),
            deduplicate=_get_bool_env("AUDIT_DEDUPLICATE", defaults.deduplicate),
            curated_path=Path(curated) if curated else None,
        )


DEFAULT_CATALOG_CONFIG = CatalogConfig()
