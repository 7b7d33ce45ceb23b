"""Source repository clients and tag resolution."""
