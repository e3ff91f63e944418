"""Command-line interface for walletgen."""
