"""
Konfiguracja tmsedit — przez zmienne środowiskowe.

Opcjonalnie plik .env w katalogu roboczym lub w katalogu głównym projektu:
  TMS_LOG_LEVEL=INFO
  TMS_BACKUP=0

Zmienne:
  TMS_LOG_LEVEL           poziom logowania (domyślnie WARNING)
  TMS_BACKUP              kopia .bak przed nadpisaniem pliku (domyślnie 1)
  TMS_DEFAULT_DEPARTMENT  dział dla `plu-add` bez --dept (domyślnie 9)
  TMS_DEFAULT_UNIT_TYPE   typ jednostki dla `plu-add` (domyślnie 1 = waga)
"""

from __future__ import annotations

import functools
import logging
import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

_PROJECT_ENV = pathlib.Path(__file__).resolve().parent.parent / ".env"

_FALSE = {"0", "false", "no", "off", "nie"}


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str
    backup: bool
    default_department: int
    default_unit_type: int


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"Zmienna {name} musi być liczbą całkowitą, jest: {raw!r}")


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        allowed = ", ".join(sorted(logging.getLevelNamesMapping()))
        raise SystemExit(f"Zmienna {name} musi być poziomem logowania ({allowed}), jest: {raw!r}")
    return level


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Wczytuje (i cache'uje) ustawienia; .env nie nadpisuje zmiennych środowiska."""
    load_dotenv(_PROJECT_ENV, override=False)
    load_dotenv(override=False)
    return Settings(
        log_level          = _env_log_level("TMS_LOG_LEVEL", "WARNING"),
        backup             = _env_bool("TMS_BACKUP", True),
        default_department = _env_int("TMS_DEFAULT_DEPARTMENT", 9),
        default_unit_type  = _env_int("TMS_DEFAULT_UNIT_TYPE", 1),
    )
