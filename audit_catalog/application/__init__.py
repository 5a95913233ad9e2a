"""
Application layer - Catalog use cases.

This layer contains:
- Ports (abstract interfaces to remote sources)
- DTOs validated at the remote boundary
- Services orchestrating aggregation and the catalog session
"""
