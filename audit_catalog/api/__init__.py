"""API layer - FastAPI surface consumed by the catalog presenter."""
