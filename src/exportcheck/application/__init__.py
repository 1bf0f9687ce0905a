"""Application layer: classification and target synthesis."""
