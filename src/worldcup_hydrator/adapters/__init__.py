"""Source and sink adapters for the World Cup finals pipeline."""
