"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces that
connect the engine to graph files and to callers.
"""
