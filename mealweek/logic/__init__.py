"""Core business logic layer.

Subpackages:
- ordering: per-day meal ordering, recipe sorting/filtering, week grid
- sync: meal <-> recipe propagation and reconciliation
- transfer: drag-and-drop move/copy protocol

planner.Planner wires them to the stores for the web layer.
"""
__all__ = ["ordering", "sync", "transfer", "planner"]
