"""Configuration, logging and error plumbing."""
