"""
Audit Catalog - Security audit catalog aggregation

Publishes a browsable catalog of security reviews by merging a curated,
fully described list of audits with report files discovered in a remote
repository directory listing.

Core pieces:
- Aggregator: curated records first, remote-discovered records after,
  de-duplicated by document URL
- View state: a one-shot LOADING -> READY lifecycle plus a selection slot
- A remote listing failure degrades to the curated list, never to an error
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
