"""Configuration and logging shared by the application."""
