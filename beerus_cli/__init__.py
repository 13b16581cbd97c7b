"""Command parsing, query coroutines and printable responses for Ethereum and StarkNet light-client queries."""

__version__ = "0.1.0"