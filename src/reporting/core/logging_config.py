import logging
import os
import sys
from typing import List, Optional


class NamespaceFilter(logging.Filter):
    def __init__(self, allowed_namespaces=None):
        super().__init__()
        self.allowed_namespaces = allowed_namespaces if allowed_namespaces is not None else []

    def filter(self, record):
        if not self.allowed_namespaces:
            return True # If no namespaces are specified, allow all records
        # Allow record if its name starts with any of the allowed namespaces
        return any(record.name.startswith(ns) for ns in self.allowed_namespaces)


def parse_namespaces(raw: Optional[str]) -> List[str]:
    """Splits a comma separated namespace list, e.g. "reporting.features,reporting.main"."""
    if not raw:
        return []
    return [ns.strip() for ns in raw.split(",") if ns.strip()]


log_formatter = logging.Formatter(
    fmt="%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app_logger = logging.getLogger("reporting")
app_logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)

# --- Namespace-based Filter (Optional) ---
# Only records from these top-level namespaces reach the console, e.g.
# LOG_NAMESPACES="reporting.features,reporting.main"
# An empty value lets everything through.
allowed_log_namespaces = parse_namespaces(os.getenv("LOG_NAMESPACES"))
if allowed_log_namespaces:
    console_handler.addFilter(NamespaceFilter(allowed_log_namespaces))

if console_handler not in app_logger.handlers:
    app_logger.addHandler(console_handler)

# --- Namespace-specific logging level configuration examples ---
# To see how date ranges get resolved and windows get cut:
# logging.getLogger("reporting.features.transactions").setLevel(logging.DEBUG)

# Note: modules use logging.getLogger(__name__), so loggers like
# "reporting.features.transactions.service" inherit from "reporting".
