"""Sub-command implementations."""
