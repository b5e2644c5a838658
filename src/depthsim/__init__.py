"""Order book execution preview: fill, slippage and latency estimates."""

__version__ = "0.1.0"
