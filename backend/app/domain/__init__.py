"""Domain records and their API schemas."""
