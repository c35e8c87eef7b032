"""Infrastructure layer - Framework-specific adapters (torch, YAML, CLI)."""
