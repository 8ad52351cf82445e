"""Domain layer: models, repositories, services, schemas."""
