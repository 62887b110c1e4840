"""REST API for the rental calendar engine."""
