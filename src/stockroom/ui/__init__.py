"""CustomTkinter user interface for Stockroom."""
