"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so application
services can depend on ports without importing adapters directly.
"""
