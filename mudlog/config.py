"""Paths, constants, and configuration."""

from __future__ import annotations

# Default trim window (feet) applied by `mudlog clean`
DEFAULT_MIN_DEPTH = 4000
DEFAULT_MAX_DEPTH = 7500

# Channels carried by every measurement, in output order
CHANNELS = ("rop", "tg", "c1", "c2", "c3", "c4", "gamma")

# Output header, one label per column (depth first)
HEADER_COLUMNS = ("Depth", "ROP", "TG", "C1", "C2", "C3", "C4", "Gamma")

# The Bloodhound export is a plain text file despite its .xls extension
FILE_ENCODING = "iso-8859-1"
