"""Domain layer: models, errors and audit events for content verification."""
