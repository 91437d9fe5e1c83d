"""Configuration, constants, and exceptions."""
