from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import Depends

from leave_balance.services.records import RecordStore, get_record_store

StoreDep = Annotated[RecordStore, Depends(get_record_store)]


def get_today() -> date:
    """The only place the wall clock is read; engine calls receive it explicitly."""
    return date.today()


TodayDep = Annotated[date, Depends(get_today)]
