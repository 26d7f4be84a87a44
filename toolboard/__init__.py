"""AI tools analytics and discovery service."""
