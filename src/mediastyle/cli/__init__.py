"""Command-line interface for mediastyle."""
