"""Configuration - Process-wide settings."""
