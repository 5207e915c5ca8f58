"""
Readers API - CRUD service for library reader records
"""

__version__ = "1.0.0"
