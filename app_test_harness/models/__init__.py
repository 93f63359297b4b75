"""Data model shared by the runner, reporters and collector."""
