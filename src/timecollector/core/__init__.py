"""Value types and the line accumulator."""
