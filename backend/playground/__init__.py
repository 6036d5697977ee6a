"""Component Playground backend."""
