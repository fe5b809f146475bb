from decimal import Decimal

from src.payroll_system.payroll_system.payroll.rates import derive_rates


def test_thirty_day_month_and_eight_hour_day():
    rates = derive_rates(30000)
    assert rates.daily_rate == Decimal("1000")
    assert rates.hourly_rate == Decimal("125")


def test_salary_given_as_text():
    rates = derive_rates("18000")
    assert rates.daily_rate == Decimal("600")
    assert rates.hourly_rate == Decimal("75")


def test_missing_or_negative_salary_counts_as_zero():
    for salary in (None, "", -5000):
        rates = derive_rates(salary)
        assert rates.basic_salary == 0
        assert rates.daily_rate == 0
        assert rates.hourly_rate == 0


def test_non_finite_salary_counts_as_zero():
    for salary in ("NaN", float("nan"), "Infinity", float("inf")):
        rates = derive_rates(salary)
        assert rates.basic_salary == 0
        assert rates.hourly_rate == 0
