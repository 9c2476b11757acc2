"""Learning domain entities."""
