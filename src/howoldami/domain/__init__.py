"""Domain layer: date formats, date specifiers, and error types."""
