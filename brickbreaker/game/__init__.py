"""BrickBreaker simulation core: entities and physics."""
