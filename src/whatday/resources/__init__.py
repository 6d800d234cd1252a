"""Data files shipped with the app (info panel catalog, card images)."""
