from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from leave_balance.config import Settings
from leave_balance.models.enums import LeaveCategory
from leave_balance.schemas.duration import LeaveDurationRequest
from leave_balance.schemas.employee import UpsertEmployeeRequest

# ---------------------------------------------------------------------------
# UpsertEmployeeRequest
# ---------------------------------------------------------------------------


def test_upsert_employee_minimal() -> None:
    req = UpsertEmployeeRequest(name="Dana", hire_date=date(2024, 1, 1))
    assert req.end_date is None
    assert req.initial_annual_balance is None


def test_upsert_employee_end_date_on_hire_date_allowed() -> None:
    req = UpsertEmployeeRequest(name="Dana", hire_date=date(2024, 1, 1), end_date=date(2024, 1, 1))
    assert req.end_date == date(2024, 1, 1)


def test_upsert_employee_rejects_empty_name() -> None:
    with pytest.raises(ValidationError):
        UpsertEmployeeRequest(name="", hire_date=date(2024, 1, 1))


def test_upsert_employee_opening_balance_without_date() -> None:
    with pytest.raises(ValidationError, match="balance_set_date"):
        UpsertEmployeeRequest(name="Dana", hire_date=date(2024, 1, 1), initial_annual_balance=3.5)


# ---------------------------------------------------------------------------
# LeaveDurationRequest
# ---------------------------------------------------------------------------


def test_leave_duration_defaults_to_annual() -> None:
    req = LeaveDurationRequest(start_date=date(2025, 1, 2), end_date=date(2025, 1, 7))
    assert req.category == LeaveCategory.ANNUAL


def test_leave_duration_rejects_unknown_category() -> None:
    with pytest.raises(ValidationError):
        LeaveDurationRequest.model_validate(
            {"start_date": "2025-01-02", "end_date": "2025-01-07", "category": "MATERNITY"},
        )


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.default_weekend_days == [5, 6]
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEAVE_BALANCE_DEFAULT_WEEKEND_DAYS", "[0, 6, 6]")
    monkeypatch.setenv("LEAVE_BALANCE_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.default_weekend_days == [0, 6]
    assert settings.log_level == "DEBUG"


def test_settings_rejects_invalid_weekday() -> None:
    with pytest.raises(ValidationError, match="0-6"):
        Settings(default_weekend_days=[5, 9])
