"""Application layer - loop-free session logic."""
