"""HTTP API for the resume editor."""
