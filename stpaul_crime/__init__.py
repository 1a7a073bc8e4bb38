"""St. Paul crime incident API."""
