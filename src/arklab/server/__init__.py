"""HTTP API over the catalog state container."""
