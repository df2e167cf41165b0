"""HTTP API for the portfolio content-management backend."""
