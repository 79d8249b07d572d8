"""Application layer – collaborators that drive aggregates."""
