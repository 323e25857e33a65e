"""Resolution and validation of schema entity names."""
