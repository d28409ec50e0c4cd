"""Domain layer for crowdmap identity (users, contacts)."""
