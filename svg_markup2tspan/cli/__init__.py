"""Command-line interface for svg-markup2tspan."""
