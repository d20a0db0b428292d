"""Database Package: declarative Base and seed data.

Invariants:
    - Single async engine per process (owned by infrastructure/database.py)
"""
