"""Infrastructure helpers: env loading, app-data paths, logging policy."""
