"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces that
connect the graph engine to external data (CSV files) and expose its
searches behind a name-based, exception-raising facade.
"""
