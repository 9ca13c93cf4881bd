"""Package internals: error catalog and exception types."""
