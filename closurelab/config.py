"""Configuration.

Module-level settings shared by the runner and the command-line harness.


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

PROGRAM_NAME = "closurelab"

# Logging (diagnostics go to stderr, snippet output to stdout)
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.WARNING

# Rendering of log lines on the console
LINE_FORMAT = "[{name}] {text}"
ERROR_LINE_FORMAT = "[{name}] error: {text}"
