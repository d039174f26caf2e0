"""Core configuration primitives."""
