import sys

from perplexity_mcp.cli import main

if __name__ == "__main__":
    sys.exit(main())
