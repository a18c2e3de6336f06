"""HTTP layer: routers and shared dependencies."""
