"""
Utilitários de data/hora do domínio.

Todos os timestamps do domínio são datetimes com timezone UTC.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional


# Menor incremento representável por datetime
TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Retorna o instante atual em UTC (timezone-aware)."""
    return datetime.now(timezone.utc)


def next_timestamp(previous: Optional[datetime] = None) -> datetime:
    """
    Retorna um timestamp estritamente maior que `previous`.

    O relógio pode devolver o mesmo valor em chamadas muito próximas
    (ou até retroceder); nesses casos avança um microssegundo a partir
    do valor anterior.

    Args:
        previous: Último timestamp conhecido (opcional)

    Returns:
        datetime UTC maior que `previous`
    """
    now = utc_now()
    if previous is not None and now <= previous:
        return previous + TICK
    return now


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """Serializa datetime em ISO-8601 (None permanece None)."""
    return value.isoformat() if value else None
