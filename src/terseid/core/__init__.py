"""Core ID engine and configuration for terseid."""
