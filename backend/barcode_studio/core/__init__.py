"""Configuration and logging shared by every module."""
