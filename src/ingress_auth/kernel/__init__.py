"""Kernel – error hierarchy, route snapshot and security policy primitives."""
