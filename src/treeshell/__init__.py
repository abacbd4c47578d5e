from __future__ import annotations

"""
treeshell: interactive composite view over the real filesystem.
"""

__version__ = "0.1.0"
