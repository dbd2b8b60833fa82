"""Extract JavaDoc/declaration pairs from Maven source jars for LLM processing."""

__version__ = "0.1.0"
