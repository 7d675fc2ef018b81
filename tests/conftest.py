"""Shared test configuration."""

import os

# Qt widgets need a platform plugin; tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
