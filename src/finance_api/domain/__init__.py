"""Domain layer: entities, enums, exceptions and value objects."""
