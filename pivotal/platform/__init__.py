"""Wire-level building blocks: entities, converters and transport."""
