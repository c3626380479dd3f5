"""Infrastructure layer: provider clients, stores and sinks."""
