"""Board infrastructure layer."""
