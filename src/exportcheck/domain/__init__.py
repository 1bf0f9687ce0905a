"""Domain layer: immutable value objects and public exceptions."""
