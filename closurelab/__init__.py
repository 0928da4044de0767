"""ClosureLab.

A small runner for a closures tutorial: a snippet registry, a capture sandbox
and a library of higher-order sequence operations.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from closurelab.runner import run

__all__ = ["run"]
