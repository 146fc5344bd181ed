"""Rate card pricing engine."""
