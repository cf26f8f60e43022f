"""Domain layer: value objects and errors for the tag report."""
