from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.enums import PayBasis
from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.payroll.area_config import AreaConfigs, AreaPayrollConfig
from src.payroll_system.payroll_system.payroll.calculator.base import GrossPayInput
from src.payroll_system.payroll_system.payroll.calculator.daily_rate_strategy import DailyRateStrategy
from src.payroll_system.payroll_system.payroll.calculator.exempted_strategy import ExemptedStrategy
from src.payroll_system.payroll_system.payroll.calculator.factory import GrossPayCalculator, GrossPayStrategyFactory
from src.payroll_system.payroll_system.payroll.calculator.fixed_rate_strategy import FixedRateStrategy

FIXED = AreaPayrollConfig(area="Head Office", is_fixed=True, is_daily=False)
DAILY = AreaPayrollConfig(area="Warehouse")


def _inp(billable: int, cutoff: int = 15, salary: str = "30000") -> GrossPayInput:
    salary = Decimal(salary)
    return GrossPayInput(basic_salary=salary, daily_rate=salary / 30, cutoff_total_days=cutoff, billable_days=billable)


def test_daily_rate_pays_billable_days():
    result = GrossPayCalculator().calculate(_inp(15), is_time_exempted=False, area_config=DAILY)

    assert result.basis == PayBasis.DAILY
    assert result.gross == Decimal("15000.00")
    assert result.absence_deduction == 0
    assert result.days == 15


def test_daily_rate_zero_attendance_pays_nothing():
    result = GrossPayCalculator().calculate(_inp(0), is_time_exempted=False, area_config=DAILY)

    assert result.gross == 0
    assert result.missing_days == 15
    assert result.absence_deduction == Decimal("15000.00")


def test_missing_config_defaults_to_daily_rate():
    result = GrossPayCalculator().calculate(_inp(10), is_time_exempted=False, area_config=None)

    assert result.basis == PayBasis.DAILY
    assert result.gross == Decimal("10000.00")


def test_fixed_rate_deducts_missing_days():
    result = GrossPayCalculator().calculate(_inp(13), is_time_exempted=False, area_config=FIXED)

    assert result.basis == PayBasis.FIXED
    assert result.missing_days == 2
    assert result.absence_deduction == Decimal("2000.00")
    assert result.gross == Decimal("13000.00")


def test_fixed_rate_without_attendance_pays_nothing():
    result = GrossPayCalculator().calculate(_inp(0), is_time_exempted=False, area_config=FIXED)

    assert result.gross == 0
    assert result.absence_deduction == Decimal("15000.00")


def test_fixed_rate_floors_gross_but_keeps_raw_value():
    # 31-day period with 5 billable days: 15000 - 26 * 1000 = -11000
    result = GrossPayCalculator().calculate(_inp(5, cutoff=31), is_time_exempted=False, area_config=FIXED)

    assert result.gross == Decimal("0.00")
    assert result.unclamped_gross == Decimal("-11000.00")


@pytest.mark.parametrize("config", [None, FIXED, DAILY])
@pytest.mark.parametrize("billable", [0, 3, 15])
def test_exemption_dominates_any_config_and_attendance(config, billable):
    result = GrossPayCalculator().calculate(_inp(billable), is_time_exempted=True, area_config=config)

    assert result.basis == PayBasis.EXEMPTED
    assert result.gross == Decimal("15000.00")
    assert result.absence_deduction == 0
    assert result.days == 15


@pytest.mark.parametrize("exempted,config", [(True, None), (False, FIXED), (False, DAILY), (False, None)])
def test_strategy_selection_is_repeatable(exempted, config):
    calc = GrossPayCalculator()
    first = calc.calculate(_inp(11), is_time_exempted=exempted, area_config=config)
    second = calc.calculate(_inp(11), is_time_exempted=exempted, area_config=config)
    assert first == second


def test_factory_priority():
    factory = GrossPayStrategyFactory()
    assert isinstance(factory.for_employee(is_time_exempted=True, area_config=FIXED), ExemptedStrategy)
    assert isinstance(factory.for_employee(is_time_exempted=False, area_config=FIXED), FixedRateStrategy)
    assert isinstance(factory.for_employee(is_time_exempted=False, area_config=DAILY), DailyRateStrategy)
    assert isinstance(factory.for_employee(is_time_exempted=False, area_config=None), DailyRateStrategy)


@pytest.mark.parametrize(
    "flags",
    [
        dict(is_fixed=True, is_daily=True),
        dict(is_fixed=False, is_daily=False),
        dict(is_monthly=True, is_semi=True),
        dict(is_monthly=False, is_semi=False),
    ],
)
def test_area_config_flags_are_exclusive(flags):
    with pytest.raises(ValidationError):
        AreaPayrollConfig(area="X", **flags)


def test_area_configs_lookup():
    configs = AreaConfigs([FIXED, DAILY])

    assert configs.for_area("Head Office") is FIXED
    assert configs.for_area("Unknown") is None
    assert configs.for_area(None) is None
    assert len(configs) == 2


def test_area_configs_reject_duplicate_area():
    with pytest.raises(ValidationError):
        AreaConfigs([DAILY, AreaPayrollConfig(area="Warehouse", is_fixed=True, is_daily=False)])
