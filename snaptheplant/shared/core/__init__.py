"""
Core utilities package for SnapThePlant.
Provides exceptions, security helpers, service wiring and FastAPI dependencies.
"""
