"""Perplexity search exposed as a Model Context Protocol tool server."""
