"""
Unit Tests for the gift-card payment eligibility module.

These tests verify:
1. Sunday-Saturday week boundaries in the program timezone
2. Lifetime totals and remaining payments
3. Lifetime cap precedence over the weekly cap
4. Payment policy validation and derived values
5. Status progress reporting
6. Host timezone resolution across daylight-saving changes

Test Categories:
- test_week_*: Week boundary tests
- test_lifetime_*: Lifetime total/remaining tests
- test_eligibility_*: Decision tests
- test_policy_*: Policy tests
- test_status_*: Status display tests
- test_host_zone_*: Host timezone tests
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from casework.service.eligibility import (
    ALREADY_PAID_THIS_WEEK,
    DEFAULT_POLICY,
    PaymentPolicy,
    PaymentSnapshot,
    build_payment_status,
    calculate_lifetime_total,
    calculate_payments_remaining,
    evaluate_eligibility,
    get_end_of_week,
    get_start_of_week,
    host_timezone,
    is_within_week,
    lifetime_limit_reason,
    paid_within_week,
    progress_percentage,
    resolve_timezone,
)

PACIFIC = ZoneInfo("America/Los_Angeles")

# Wednesday 2024-06-12, 14:30 local
WEDNESDAY = datetime(2024, 6, 12, 14, 30, tzinfo=PACIFIC)


def make_payment(issued_at: datetime, amount: int = 80) -> PaymentSnapshot:
    return PaymentSnapshot(amount=amount, issued_at=issued_at)


def weekly_payments(count: int, before: datetime) -> list:
    """One payment per week for ``count`` weeks, all before ``before``'s week."""
    return [make_payment(before - timedelta(weeks=i + 1)) for i in range(count)]


# =============================================================================
# Week Boundary Tests
# =============================================================================

class TestWeekBoundaries:
    """Tests for the Sunday-Saturday payment week."""

    def test_week_starts_on_previous_sunday_midnight(self):
        start = get_start_of_week(WEDNESDAY)

        assert start == datetime(2024, 6, 9, 0, 0, tzinfo=PACIFIC)
        assert start.weekday() == 6

    def test_week_start_on_sunday_is_same_day(self):
        sunday_noon = datetime(2024, 6, 9, 12, 0, tzinfo=PACIFIC)

        assert get_start_of_week(sunday_noon) == datetime(2024, 6, 9, tzinfo=PACIFIC)

    def test_week_start_on_saturday_goes_back_six_days(self):
        saturday = datetime(2024, 6, 15, 23, 0, tzinfo=PACIFIC)

        assert get_start_of_week(saturday) == datetime(2024, 6, 9, tzinfo=PACIFIC)

    def test_week_ends_saturday_last_millisecond(self):
        end = get_end_of_week(WEDNESDAY)

        assert end == datetime(2024, 6, 15, 23, 59, 59, 999000, tzinfo=PACIFIC)

    def test_week_is_not_iso_week(self):
        """Monday belongs to the week that started the day before."""
        monday = datetime(2024, 6, 10, 9, 0, tzinfo=PACIFIC)

        assert get_start_of_week(monday) == datetime(2024, 6, 9, tzinfo=PACIFIC)

    def test_week_saturday_last_millisecond_is_inside(self):
        start = get_start_of_week(WEDNESDAY)
        end = get_end_of_week(WEDNESDAY)
        last_ms = datetime(2024, 6, 15, 23, 59, 59, 999000, tzinfo=PACIFIC)

        assert is_within_week(last_ms, start, end) is True

    def test_week_next_sunday_midnight_is_outside(self):
        start = get_start_of_week(WEDNESDAY)
        end = get_end_of_week(WEDNESDAY)
        next_sunday = datetime(2024, 6, 16, 0, 0, tzinfo=PACIFIC)

        assert is_within_week(next_sunday, start, end) is False

    def test_week_utc_timestamp_compared_in_local_time(self):
        """
        Saturday 20:00 Pacific is already Sunday 03:00 UTC, but it still
        belongs to the Pacific week.
        """
        start = get_start_of_week(WEDNESDAY)
        end = get_end_of_week(WEDNESDAY)
        stored = datetime(2024, 6, 16, 3, 0, tzinfo=timezone.utc)

        assert is_within_week(stored, start, end) is True

    def test_week_naive_timestamp_treated_as_utc(self):
        start = get_start_of_week(WEDNESDAY)
        end = get_end_of_week(WEDNESDAY)
        # 2024-06-09 06:00 UTC is Saturday 23:00 Pacific, previous week
        naive = datetime(2024, 6, 9, 6, 0)

        assert is_within_week(naive, start, end) is False


# =============================================================================
# Lifetime Total Tests
# =============================================================================

class TestLifetimeTotals:
    """Tests for lifetime totals and remaining payments."""

    def test_lifetime_total_empty(self):
        assert calculate_lifetime_total([]) == 0

    def test_lifetime_total_sums_amounts(self):
        payments = weekly_payments(3, WEDNESDAY)

        assert calculate_lifetime_total(payments) == 240

    def test_lifetime_remaining_from_zero(self):
        assert calculate_payments_remaining(0, DEFAULT_POLICY) == 25

    def test_lifetime_remaining_floors(self):
        assert calculate_payments_remaining(1930, DEFAULT_POLICY) == 0
        assert calculate_payments_remaining(1920, DEFAULT_POLICY) == 1

    def test_lifetime_remaining_never_negative(self):
        assert calculate_payments_remaining(2400, DEFAULT_POLICY) == 0


# =============================================================================
# Eligibility Decision Tests
# =============================================================================

class TestEvaluateEligibility:
    """Tests for the combined weekly and lifetime decision."""

    def test_eligibility_no_payments_allowed(self):
        result = evaluate_eligibility([], WEDNESDAY, DEFAULT_POLICY)

        assert result.allowed is True
        assert result.reason is None
        assert result.lifetime_total == 0
        assert result.payments_count == 0
        assert result.payments_remaining == 25
        assert result.paid_this_week is False
        assert result.reached_lifetime_cap is False

    def test_eligibility_paid_yesterday_blocked(self):
        payments = [make_payment(WEDNESDAY - timedelta(days=1))]

        result = evaluate_eligibility(payments, WEDNESDAY, DEFAULT_POLICY)

        assert result.allowed is False
        assert result.reason == ALREADY_PAID_THIS_WEEK
        assert result.paid_this_week is True
        assert result.reached_lifetime_cap is False
        assert result.lifetime_total == 80
        assert result.payments_remaining == 24

    def test_eligibility_paid_last_week_allowed(self):
        last_saturday = datetime(2024, 6, 8, 23, 59, 59, 999000, tzinfo=PACIFIC)

        result = evaluate_eligibility([make_payment(last_saturday)], WEDNESDAY, DEFAULT_POLICY)

        assert result.allowed is True
        assert result.payments_remaining == 24

    def test_eligibility_saturday_payment_blocks_until_sunday(self):
        saturday_late = datetime(2024, 6, 15, 23, 59, 59, 999000, tzinfo=PACIFIC)
        sunday = datetime(2024, 6, 16, 0, 0, tzinfo=PACIFIC)
        payments = [make_payment(datetime(2024, 6, 15, 10, 0, tzinfo=PACIFIC))]

        assert evaluate_eligibility(payments, saturday_late, DEFAULT_POLICY).allowed is False
        assert evaluate_eligibility(payments, sunday, DEFAULT_POLICY).allowed is True

    def test_eligibility_twenty_four_payments_one_left(self):
        payments = weekly_payments(24, WEDNESDAY)

        result = evaluate_eligibility(payments, WEDNESDAY, DEFAULT_POLICY)

        assert result.allowed is True
        assert result.lifetime_total == 1920
        assert result.payments_count == 24
        assert result.payments_remaining == 1

    def test_eligibility_cap_reached_blocked(self):
        payments = weekly_payments(25, WEDNESDAY)

        result = evaluate_eligibility(payments, WEDNESDAY, DEFAULT_POLICY)

        assert result.allowed is False
        assert result.reason == (
            "Participant has reached the $2,000 lifetime limit. "
            "No more payments can be issued."
        )
        assert result.reached_lifetime_cap is True
        assert result.payments_remaining == 0

    def test_eligibility_cap_takes_precedence_over_week(self):
        """At the cap with a payment this week, the cap is reported."""
        payments = weekly_payments(24, WEDNESDAY) + [make_payment(WEDNESDAY - timedelta(hours=2))]

        result = evaluate_eligibility(payments, WEDNESDAY, DEFAULT_POLICY)

        assert result.allowed is False
        assert result.reached_lifetime_cap is True
        assert result.paid_this_week is False
        assert result.reason == lifetime_limit_reason(DEFAULT_POLICY)

    def test_eligibility_weekly_accumulation(self):
        """N payments in N distinct weeks add up to 80*N."""
        for n in (1, 5, 12):
            result = evaluate_eligibility(weekly_payments(n, WEDNESDAY), WEDNESDAY, DEFAULT_POLICY)

            assert result.lifetime_total == 80 * n
            assert result.payments_remaining == 25 - n

    def test_eligibility_is_deterministic(self):
        payments = weekly_payments(3, WEDNESDAY)

        first = evaluate_eligibility(payments, WEDNESDAY, DEFAULT_POLICY)
        second = evaluate_eligibility(payments, WEDNESDAY, DEFAULT_POLICY)

        assert first == second

    def test_paid_within_week_ignores_future_weeks(self):
        next_week = WEDNESDAY + timedelta(days=7)

        assert paid_within_week([make_payment(next_week)], WEDNESDAY) is False


# =============================================================================
# Policy Tests
# =============================================================================

class TestPaymentPolicy:
    """Tests for policy constants and validation."""

    def test_policy_defaults(self):
        assert DEFAULT_POLICY.payment_amount == 80
        assert DEFAULT_POLICY.lifetime_cap == 2000
        assert DEFAULT_POLICY.max_payments == 25

    def test_policy_variant(self):
        small = PaymentPolicy(payment_amount=50, lifetime_cap=100)
        payments = weekly_payments(2, WEDNESDAY)
        payments = [make_payment(p.issued_at, amount=50) for p in payments]

        result = evaluate_eligibility(payments, WEDNESDAY, small)

        assert small.max_payments == 2
        assert result.reached_lifetime_cap is True
        assert result.reason == lifetime_limit_reason(small)

    def test_policy_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_POLICY.payment_amount = 100

    def test_policy_rejects_cap_below_amount(self):
        with pytest.raises(ValidationError):
            PaymentPolicy(payment_amount=100, lifetime_cap=50)

    def test_policy_rejects_uneven_cap(self):
        with pytest.raises(ValidationError):
            PaymentPolicy(payment_amount=80, lifetime_cap=1990)

    def test_policy_rejects_non_positive_amount(self):
        with pytest.raises(ValidationError):
            PaymentPolicy(payment_amount=0)


# =============================================================================
# Status Tests
# =============================================================================

class TestPaymentStatus:
    """Tests for the status wrapper."""

    def test_status_progress_percentage(self):
        eligibility = evaluate_eligibility(weekly_payments(24, WEDNESDAY), WEDNESDAY, DEFAULT_POLICY)

        status = build_payment_status(eligibility, DEFAULT_POLICY)

        assert status.progress_percentage == 96
        assert status.max_payments == 25
        assert status.payment_amount == 80
        assert status.lifetime_cap == 2000
        assert status.allowed is True

    def test_status_to_dict_flattens_eligibility(self):
        eligibility = evaluate_eligibility([], WEDNESDAY, DEFAULT_POLICY)

        data = build_payment_status(eligibility, DEFAULT_POLICY).to_dict()

        assert data["allowed"] is True
        assert data["reason"] is None
        assert data["payments_remaining"] == 25
        assert data["progress_percentage"] == 0

    def test_status_progress_rounds_half_up(self):
        """5 of 200 is 2.5 percent, shown as 3."""
        policy = PaymentPolicy(payment_amount=5, lifetime_cap=200)
        eligibility = evaluate_eligibility(
            [make_payment(WEDNESDAY - timedelta(weeks=1), amount=5)], WEDNESDAY, policy
        )

        status = build_payment_status(eligibility, policy)

        assert status.progress_percentage == 3

    @pytest.mark.parametrize(
        "total,cap,expected",
        [(5, 200, 3), (15, 200, 8), (25, 200, 13), (1, 200, 1), (0, 2000, 0), (2000, 2000, 100)],
    )
    def test_status_progress_halves_go_up(self, total, cap, expected):
        policy = PaymentPolicy(payment_amount=5, lifetime_cap=cap)

        assert progress_percentage(total, policy) == expected


# =============================================================================
# Host Timezone Tests
# =============================================================================

# (payment on Friday noon, Saturday 23:30, Sunday 00:10), all local wall times
DST_WEEKS = [
    # Last PDT week; the following Sunday is the fall-back day
    (datetime(2026, 10, 30, 12, 0), datetime(2026, 10, 31, 23, 30), datetime(2026, 11, 1, 0, 10)),
    # Two weeks after fall-back, in PST
    (datetime(2026, 11, 13, 12, 0), datetime(2026, 11, 14, 23, 30), datetime(2026, 11, 15, 0, 10)),
    # Last PST week; the following Sunday is the spring-forward day
    (datetime(2026, 3, 6, 12, 0), datetime(2026, 3, 7, 23, 30), datetime(2026, 3, 8, 0, 10)),
    # Week after spring-forward, in PDT
    (datetime(2026, 3, 13, 12, 0), datetime(2026, 3, 14, 23, 30), datetime(2026, 3, 15, 0, 10)),
]


def local_instant(wall: datetime, zone) -> datetime:
    """A wall time in ``zone`` as the process clock would see it: UTC, then converted."""
    return wall.replace(tzinfo=zone).astimezone(timezone.utc).astimezone(zone)


class TestHostTimezone:
    """Tests for resolving the host zone when no program zone is set."""

    def test_host_zone_from_tz_env(self, monkeypatch):
        monkeypatch.setenv("TZ", "America/Los_Angeles")

        zone = resolve_timezone("")

        assert isinstance(zone, ZoneInfo)
        assert zone.key == "America/Los_Angeles"

    def test_host_zone_strips_colon_prefix(self, monkeypatch):
        monkeypatch.setenv("TZ", ":Europe/Berlin")

        assert host_timezone().key == "Europe/Berlin"

    def test_host_zone_from_localtime_symlink(self, monkeypatch, tmp_path):
        monkeypatch.delenv("TZ", raising=False)
        target = tmp_path / "zoneinfo" / "America" / "New_York"
        target.parent.mkdir(parents=True)
        target.write_bytes(b"")
        link = tmp_path / "localtime"
        link.symlink_to(target)

        assert host_timezone(localtime=link).key == "America/New_York"

    def test_host_zone_posix_tz_without_localtime_is_utc(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TZ", "PST8PDT,M3.2.0,M11.1.0")

        zone = host_timezone(localtime=tmp_path / "missing")

        assert zone.key == "UTC"

    def test_host_zone_offset_follows_dst(self, monkeypatch):
        monkeypatch.setenv("TZ", "America/Los_Angeles")
        zone = resolve_timezone("")

        summer = datetime(2026, 7, 1, 12, 0, tzinfo=zone)
        winter = datetime(2026, 12, 1, 12, 0, tzinfo=zone)

        assert summer.utcoffset() == timedelta(hours=-7)
        assert winter.utcoffset() == timedelta(hours=-8)

    @pytest.mark.parametrize("paid_wall,saturday_wall,sunday_wall", DST_WEEKS)
    def test_host_zone_saturday_blocks_sunday_opens(
        self, monkeypatch, paid_wall, saturday_wall, sunday_wall
    ):
        monkeypatch.setenv("TZ", "America/Los_Angeles")
        zone = resolve_timezone("")
        paid_at = paid_wall.replace(tzinfo=zone).astimezone(timezone.utc)
        payments = [make_payment(paid_at)]

        saturday = evaluate_eligibility(payments, local_instant(saturday_wall, zone), DEFAULT_POLICY)
        sunday = evaluate_eligibility(payments, local_instant(sunday_wall, zone), DEFAULT_POLICY)

        assert saturday.allowed is False
        assert saturday.paid_this_week is True
        assert sunday.allowed is True
        assert sunday.paid_this_week is False
