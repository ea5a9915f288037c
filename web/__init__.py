"""Flask web application for Idea Board."""
