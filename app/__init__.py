"""Blog platform REST API."""
