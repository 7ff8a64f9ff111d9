"""Configuration, color value type and simulation pipeline."""
