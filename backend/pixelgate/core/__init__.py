"""Configuration, constants and logging shared across the application."""
