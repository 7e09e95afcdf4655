"""Configurazione centrale per il motore delle missioni.

Qui centralizziamo i parametri modificabili (politica sui target non validi,
livello di log, log su file). Tutti i valori hanno un default sensato e
possono essere sovrascritti via variabili d'ambiente.
"""
from __future__ import annotations
import os

def _get_int_env(name: str, default: int, minval: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw)
        if minval is not None and v < minval:
            return default
        return v
    except ValueError:
        return default


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in {"1", "true", "yes", "on"}


def _get_choice_env(name: str, default: str, choices: set[str]) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val if val in choices else default


# ---------------- Obiettivi ----------------
# Cosa fare con un obiettivo costruito con target <= 0:
#   "reject"    -> InvalidConfigurationError
#   "normalize" -> target portato a 1 (con warning)
TARGET_POLICIES = {"reject", "normalize"}
DEFAULT_TARGET_POLICY: str = "reject"
ENV_TARGET_POLICY = "MC_TARGET_POLICY"

# Target minimo valido per un obiettivo
MIN_OBJECTIVE_TARGET: int = 1


def get_target_policy() -> str:
    """Ritorna la politica per i target non validi. Var: MC_TARGET_POLICY."""
    return _get_choice_env(ENV_TARGET_POLICY, DEFAULT_TARGET_POLICY, TARGET_POLICIES)


# ---------------- Logging ----------------
LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


def get_log_level() -> str:
    """Livello di log di default. Var: MC_LOG_LEVEL (default INFO)."""
    return _get_choice_env("MC_LOG_LEVEL", "info", LOG_LEVELS).upper()


def get_log_to_file() -> bool:
    """Abilita il log su file. Var: MC_LOG_TO_FILE (default False)."""
    return _get_bool_env("MC_LOG_TO_FILE", False)


def get_log_dir() -> str:
    """Cartella dei file di log. Var: MC_LOG_DIR (default data/logs)."""
    return os.getenv("MC_LOG_DIR", "data/logs").strip()


def get_log_backup_count() -> int:
    """Quanti file di log tenere prima di ruotare. Var: MC_LOG_BACKUPS (default 5)."""
    return _get_int_env("MC_LOG_BACKUPS", 5, minval=1)


__all__ = [
    # Obiettivi
    "TARGET_POLICIES", "DEFAULT_TARGET_POLICY", "ENV_TARGET_POLICY",
    "MIN_OBJECTIVE_TARGET", "get_target_policy",
    # Logging
    "LOG_LEVELS", "get_log_level", "get_log_to_file", "get_log_dir",
    "get_log_backup_count",
]
