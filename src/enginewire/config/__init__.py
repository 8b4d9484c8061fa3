"""Configuration layer: settings sources, TOML discovery, logging setup."""
