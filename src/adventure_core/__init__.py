"""World model and shared infrastructure for the adventure prompt."""
