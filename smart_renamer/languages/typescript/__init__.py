"""TypeScript / JavaScript front-end."""
