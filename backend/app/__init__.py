"""
Portfolio Backend — Application Package
=========================================

Layers:

    ┌─────────────────────────────────────┐
    │  Routes    /api/<resource>?action=  │  ← method + action dispatch
    ├─────────────────────────────────────┤
    │  Services  one statement per op     │  ← validation, envelopes
    ├─────────────────────────────────────┤
    │  Models & Schemas                   │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │  Database  async sessions           │
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
