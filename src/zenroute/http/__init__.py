"""Request target helpers — query string parsing."""
