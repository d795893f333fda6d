"""Editorial workflow service with word-level change tracking."""
