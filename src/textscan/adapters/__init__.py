"""
textscan adapters

Bridges between textscan's injected-collaborator protocols and the host
program's own facilities.
"""

from .stdlib_logger import StdlibLogger

__all__ = ['StdlibLogger']
