"""FastMCP transport for docgrep."""
