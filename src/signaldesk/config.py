"""SignalDesk configuration, read once from the environment."""

import os


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# ── Row source views ──────────────────────────────────────────────────────────
EXPLAIN_VIEW = os.getenv("SIGNALDESK_EXPLAIN_VIEW", "v_production_decisions_explain")
BASE_VIEW = os.getenv("SIGNALDESK_BASE_VIEW", "v_production_decisions")
ENTRIES_VIEW = os.getenv("SIGNALDESK_ENTRIES_VIEW", "v_signal_entries_enriched")

# ── Boundary policy ───────────────────────────────────────────────────────────
DEMO_FALLBACK = _env_bool("SIGNALDESK_DEMO_FALLBACK")
EVIDENCE_LIMIT = max(1, _env_int("SIGNALDESK_EVIDENCE_LIMIT", 50))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("SIGNALDESK_LOG_LEVEL", "INFO")
