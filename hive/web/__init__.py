"""Web frontend — FastAPI app exposing the hive canvas as JSON."""
