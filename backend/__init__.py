"""Love Note backend API package."""
