"""Pytest bootstrap for running against the checkout.

Puts the repository root on sys.path so ``import lazylist`` picks up the
working tree even when the ``pytest`` entry point starts elsewhere.
"""

from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = str(Path(__file__).resolve().parent.parent)

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
