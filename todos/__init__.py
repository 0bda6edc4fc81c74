"""
Todos service package.

A small FastAPI application managing an in-memory list of todos, plus a
passthrough endpoint relaying posts from an upstream JSON API.
"""
