"""Domain models and errors.

Pure data structures (Pydantic v2): no HTTP, no subprocesses, no CLI.
"""
