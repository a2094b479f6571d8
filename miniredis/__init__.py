"""Redis-style value types, key, hash, list and sorted-set commands over an in-memory keyspace, and a RESP client."""

__version__ = "0.1.0"