from dataclasses import replace

import pytest

from carcost.engine.loan import resolve_loan
from carcost.engine.schedule import generate_schedule, insurance_discount


def _schedule(params):
    return generate_schedule(params, resolve_loan(params))


class TestInsuranceDiscount:
    def test_first_year_full_price(self):
        assert insurance_discount(1) == 1

    def test_compounds_yearly(self):
        assert insurance_discount(2) == pytest.approx(0.9)
        assert insurance_discount(3) == pytest.approx(0.81)
        assert insurance_discount(5) == pytest.approx(0.6561)


class TestGenerateSchedule:
    def test_length_matches_term(self, canonical_params):
        assert len(_schedule(canonical_params)) == 60

    def test_months_sequential(self, canonical_params):
        schedule = _schedule(canonical_params)
        assert [r.month for r in schedule] == list(range(1, 61))

    def test_year_numbering(self, odd_term_params):
        schedule = _schedule(odd_term_params)
        assert [r.year for r in schedule] == [1] * 12 + [2] * 2

    def test_first_month_of_year_flags(self, canonical_params):
        flagged = [r.month for r in _schedule(canonical_params) if r.is_first_month_of_year]
        assert flagged == [1, 13, 25, 37, 49]

    def test_principal_conservation(self, canonical_params):
        schedule = _schedule(canonical_params)
        loan = resolve_loan(canonical_params)
        assert sum(r.principal for r in schedule) == pytest.approx(loan.loan_amount, rel=1e-9)

    def test_constant_payment(self, canonical_params):
        schedule = _schedule(canonical_params)
        assert len({r.payment for r in schedule}) == 1
        assert len({r.principal for r in schedule}) == 1
        assert len({r.interest for r in schedule}) == 1

    def test_payment_is_principal_plus_interest(self, odd_term_params):
        for r in _schedule(odd_term_params):
            assert r.payment == pytest.approx(r.principal + r.interest)

    def test_balance_non_increasing(self, canonical_params):
        schedule = _schedule(canonical_params)
        for i in range(1, len(schedule)):
            assert schedule[i].remaining_principal <= schedule[i - 1].remaining_principal

    @pytest.mark.parametrize("term", [1, 7, 14, 36, 60, 84])
    def test_final_balance_exactly_zero(self, canonical_params, term):
        schedule = _schedule(replace(canonical_params, term_months=term))
        assert schedule[-1].remaining_principal == 0

    def test_balance_never_negative(self, odd_term_params):
        assert all(r.remaining_principal >= 0 for r in _schedule(odd_term_params))

    def test_first_balance(self, loan_only_params):
        first = _schedule(loan_only_params)[0]
        assert first.remaining_principal == pytest.approx(800_000 - 800_000 / 60)

    def test_insurance_constant_within_year(self, canonical_params):
        schedule = _schedule(canonical_params)
        for year in range(1, 6):
            premiums = {r.insurance for r in schedule if r.year == year}
            assert len(premiums) == 1

    def test_insurance_decays_ten_percent_per_year(self, canonical_params):
        schedule = _schedule(canonical_params)
        firsts = [r for r in schedule if r.is_first_month_of_year]
        assert firsts[0].insurance == pytest.approx(25_000 / 12)
        for prev, cur in zip(firsts, firsts[1:]):
            assert cur.insurance == pytest.approx(prev.insurance * 0.9)
            assert cur.insurance < prev.insurance

    def test_other_costs_constant(self, canonical_params):
        r = _schedule(canonical_params)[-1]
        assert r.act == pytest.approx(650 / 12)
        assert r.tax == pytest.approx(1_600 / 12)
        assert r.maintenance == pytest.approx(500)
        assert r.fuel == 3_000

    def test_total_monthly_sums_components(self, canonical_params):
        for r in _schedule(canonical_params):
            expected = r.payment + r.insurance + r.act + r.tax + r.maintenance + r.fuel
            assert r.total_monthly == pytest.approx(expected)
            assert r.running_costs == pytest.approx(r.act + r.tax + r.maintenance + r.fuel)

    def test_loan_only_total_is_payment(self, loan_only_params):
        for r in _schedule(loan_only_params):
            assert r.total_monthly == r.payment
