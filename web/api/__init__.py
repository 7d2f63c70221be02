"""API views returning pydantic response models."""
