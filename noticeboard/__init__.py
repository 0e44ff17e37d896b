"""
Notice Board — Application Package Initializer
================================================

What: Marks the `noticeboard` directory as a Python package.
Who:  Imported by uvicorn (`noticeboard.main:app`), the CLI
      (`python -m noticeboard`), and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │     Terminal Board (ui/, client)    │  ← rich + InquirerPy over httpx
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, not-found mapping
    ├─────────────────────────────────────┤
    │     Collection (Persistence API)    │  ← insert / find / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Connection)        │  ← Async engine and sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
