"""Infrastructure layer: port adapters and observability."""
