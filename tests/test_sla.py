"""Tests for SLA breach evaluation."""

from datetime import timedelta

import pytest

from security_sla.utils.models import AlertKind, Thresholds
from security_sla.utils.sla import evaluate_alerts, filter_breached_alerts, is_breached


class TestFilterBreachedAlerts:
    """Test filter_breached_alerts."""

    def test_all_alerts_younger_than_every_threshold(self, make_alert, thresholds, now):
        alerts = [make_alert(1), make_alert(3, severity="low"), make_alert(6.5, severity="critical")]

        assert filter_breached_alerts(alerts, thresholds, now=now) == []

    def test_alert_older_than_max_threshold_is_breached(self, make_alert, thresholds, now):
        old = make_alert(365, severity="low", number=2)
        alerts = [make_alert(1), old]

        assert filter_breached_alerts(alerts, thresholds, now=now) == [old]

    def test_empty_input(self, thresholds, now):
        assert filter_breached_alerts([], thresholds, now=now) == []

    def test_input_order_is_kept(self, make_alert, thresholds, now):
        alerts = [make_alert(400, number=1), make_alert(2, number=2), make_alert(200, number=3)]

        breached = filter_breached_alerts(alerts, thresholds, now=now)

        assert [a.link[-1] for a in breached] == ["1", "3"]

    def test_age_equal_to_threshold_is_not_breached(self, make_alert, now):
        thresholds = Thresholds.from_days(10, 10, 10, 10)

        assert filter_breached_alerts([make_alert(10)], thresholds, now=now) == []
        assert len(filter_breached_alerts([make_alert(10.01)], thresholds, now=now)) == 1

    @pytest.mark.parametrize("severity", ["critical", "high", "medium", "low", "note", ""])
    def test_smallest_threshold_decides_regardless_of_severity(self, make_alert, thresholds, now, severity):
        """An alert past the critical tier breaches even when its own tier is larger."""
        alert = make_alert(8, severity=severity)

        assert is_breached(alert, thresholds, now)

    def test_secret_scanning_alert(self, make_alert, thresholds, now):
        alert = make_alert(8, kind=AlertKind.SECRET_SCANNING, severity="critical")

        assert filter_breached_alerts([alert], thresholds, now=now) == [alert]


class TestEvaluateAlerts:
    """Test evaluate_alerts."""

    def test_empty_alert_list_succeeds(self, thresholds, now):
        result = evaluate_alerts([], thresholds, now=now)

        assert result.alerts == []
        assert result.breached == []
        assert result.passed
        assert result.conclusion == "success"

    def test_breach_fails(self, make_alert, thresholds, now):
        alerts = [make_alert(1), make_alert(100)]

        result = evaluate_alerts(alerts, thresholds, now=now)

        assert len(result.alerts) == 2
        assert len(result.breached) == 1
        assert not result.passed
        assert result.conclusion == "failure"

    def test_zero_day_thresholds_breach_everything_older_than_now(self, make_alert, now):
        thresholds = Thresholds.from_days(0, 0, 0, 0)

        result = evaluate_alerts([make_alert(0.001)], thresholds, now=now)

        assert result.conclusion == "failure"


class TestThresholds:
    """Test Thresholds construction."""

    def test_from_days(self):
        t = Thresholds.from_days(7, 30, 90, 180)

        assert t.critical == timedelta(days=7)
        assert t.high == timedelta(days=30)
        assert t.medium == timedelta(days=90)
        assert t.low == timedelta(days=180)
        assert list(t.as_dict()) == ["critical", "high", "medium", "low"]

    def test_negative_days_rejected(self):
        with pytest.raises(ValueError, match="high threshold"):
            Thresholds.from_days(7, -1, 90, 180)
