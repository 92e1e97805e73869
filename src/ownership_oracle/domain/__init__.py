"""Ownership resolution domain: routing, policy and the resolver itself."""
