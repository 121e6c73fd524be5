"""Domain layer: the reflow engine, its value objects and the library errors."""
