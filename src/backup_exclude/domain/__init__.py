"""Domain layer: value objects, enums and exceptions of the matching engine."""
