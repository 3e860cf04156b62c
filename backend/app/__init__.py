"""
Flavorbase Backend: Application Package Initializer
=====================================================

Architecture Note:

    ┌─────────────────────────────────────┐
    │   Routes (validate → one call →     │  ← HTTP concerns only
    │           shape the response)       │
    ├─────────────────────────────────────┤
    │   Repository (data access facade)   │  ← find/count/create/update/destroy
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (Persistence)            │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
