"""Adapters connecting the resolver to HTTP sources and the EVM."""
