"""Movie ratings catalog: running averages, partial-match lookup, JSON storage."""
