"""
Severity and verbosity level constants.

Two scales live here:

Logging severities — the values handed to the stdlib ``logging``
module by the ilog helpers. TRACE sits below DEBUG and is registered
with ``logging`` on import so records show "TRACE" as their level name.

    TRACE=5  DEBUG=10  INFO=20  WARN=30  ERROR=40

OutputManager verbosity — a plain integer threshold for printed
output. The emit rule is simple:

    message.level <= verbosity  ->  message is shown

    <-- quieter ---------- default ---------- louder -->
    -4      -3      -2      -1      0       1       2       3
    wall    errors  warns   minimal default info    debug   trace
"""

import logging

# Logging severities
TRACE = 5
DEBUG = logging.DEBUG
INFO = logging.INFO
WARN = logging.WARNING
ERROR = logging.ERROR

logging.addLevelName(TRACE, "TRACE")

# Verbosity levels for OutputManager.emit()
V_TRACE = 3          # Function entry/exit from @trace
V_DEBUG = 2          # Internal state
V_INFO = 1           # Progress and summary info
V_DEFAULT = 0        # Default output (iprint)

V_MINIMAL = -1       # Suppress default output
V_WARNING = -2       # Warnings and errors only
V_ERROR = -3         # Errors only
V_NOTHING = -4       # Hard wall, nothing at all
