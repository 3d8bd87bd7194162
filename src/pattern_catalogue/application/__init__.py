"""Application layer - demo drivers and the service that runs them."""
