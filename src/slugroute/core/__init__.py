"""Core domain: records, codec, category tree, configuration."""
