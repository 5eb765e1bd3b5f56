"""Core configuration, logging, errors and caching for the Pivotal client."""
