"""Core application services: configuration."""
