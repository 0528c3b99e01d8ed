"""HTTP API for Barnyard."""
