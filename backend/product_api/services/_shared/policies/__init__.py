"""Access rules shared by services."""
