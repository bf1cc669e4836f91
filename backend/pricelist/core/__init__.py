"""Settings, logging and error handling."""
