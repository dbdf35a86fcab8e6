"""MCP server package for the Perplexity search adapter.

Exposes one tool to LLM agents:
- search

Transport:
- stdio (perplexity_mcp.mcp.server)
- SSE + POST messages (perplexity_mcp.main)
"""
