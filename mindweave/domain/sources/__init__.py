"""Sources domain: ingested content and its weaving lifecycle."""
