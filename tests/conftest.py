"""Test harness configuration."""

import os

# Rich wraps console output at the terminal width (80 columns when not a TTY),
# which splits messages containing long temporary paths. Use a wide terminal.
os.environ.setdefault("COLUMNS", "500")
