"""HTTP API for the Deva Converter (FastAPI)."""
