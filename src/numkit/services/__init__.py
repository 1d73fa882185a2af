"""Service layer — boundary validation wrapped around the domain algorithms.

Services may import from domain, config, and errors.
They are the only layer that raises numkit errors.
"""
