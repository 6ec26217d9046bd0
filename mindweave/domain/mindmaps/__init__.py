"""Mind-map domain: nodes and edges woven from a source."""
