from datetime import datetime, timedelta, timezone

from tdas.dos import DoSDetector

BASE = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=-3)))


def visits(detector, ip, offsets):
    for seconds in offsets:
        detector.add_visit(ip, BASE + timedelta(seconds=seconds))


def test_no_visits_no_attackers():
    assert DoSDetector().attackers() == []


def test_five_quick_visits_flag_attacker():
    detector = DoSDetector()
    visits(detector, "192.168.0.1", [0, 0.2, 0.4, 0.6, 0.8])
    assert detector.attackers() == ["192.168.0.1"]


def test_four_visits_are_not_enough():
    detector = DoSDetector()
    visits(detector, "192.168.0.1", [0, 0.1, 0.2, 0.3])
    assert detector.attackers() == []


def test_exactly_two_seconds_is_not_an_attack():
    detector = DoSDetector()
    visits(detector, "10.0.0.1", [0, 0.5, 1, 1.5, 2])
    assert detector.attackers() == []


def test_slow_visits_are_not_an_attack():
    detector = DoSDetector()
    visits(detector, "10.0.0.1", [0, 1, 2, 3, 4, 5, 6, 7])
    assert detector.attackers() == []


def test_window_slides():
    detector = DoSDetector()
    visits(detector, "10.0.0.1", [0, 10, 10.1, 10.2, 10.3])
    assert detector.attackers() == []
    visits(detector, "10.0.0.1", [10.4])
    assert detector.attackers() == ["10.0.0.1"]


def test_attacker_listed_once():
    detector = DoSDetector()
    visits(detector, "10.0.0.1", [0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7])
    assert detector.attackers() == ["10.0.0.1"]


def test_attackers_sorted_numerically():
    detector = DoSDetector()
    quick = [0, 0.1, 0.2, 0.3, 0.4]
    for ip in ["10.0.0.10", "9.0.0.1", "10.0.0.2", "200.1.1.1"]:
        visits(detector, ip, quick)
    assert detector.attackers() == ["9.0.0.1", "10.0.0.2", "10.0.0.10", "200.1.1.1"]


def test_only_fast_ips_flagged():
    detector = DoSDetector()
    visits(detector, "1.1.1.1", [0, 0.1, 0.2, 0.3, 0.4])
    visits(detector, "2.2.2.2", [0, 3, 6, 9, 12])
    result = detector.attackers()
    assert "1.1.1.1" in result
    assert "2.2.2.2" not in result
    assert len(result) == 1