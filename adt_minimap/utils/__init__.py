# adt_minimap/utils/__init__.py
from .logging import setup_logging

__all__ = ['setup_logging']
