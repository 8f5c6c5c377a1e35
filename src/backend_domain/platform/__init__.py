"""Feature modules built on the shared kernel."""
