"""structcheck presentation layer: CLI and pytest plugin."""
