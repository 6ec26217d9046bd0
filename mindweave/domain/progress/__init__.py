"""Progress domain: study time log and dashboard aggregation."""
