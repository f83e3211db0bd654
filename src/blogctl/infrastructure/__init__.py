"""Infrastructure layer — file I/O, tag persistence, and templates."""
