"""Configuration layer — settings discovery, TOML source, and logging setup."""
