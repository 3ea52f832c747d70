"""Core layer registry, stylesheet scanning, and configuration."""
