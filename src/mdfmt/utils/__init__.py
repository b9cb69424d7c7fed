#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/__init__.py
"""Helper modules for text handling, code formatting and I/O."""
