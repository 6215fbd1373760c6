"""
RPAL Scanner Command-Line Interface
===================================

- **rpalscan**: dump the token stream of an RPAL source file

Implemented as a Click-based CLI application.
"""

__all__ = ["rpalscan"]
