from domain.user_profile import Habits
from domain.vehicle import Terrain
from matching.domain import SubScores, TripMetrics
from matching.summary import build_summary, runner_up_reason, top_factors

METRICS = TripMetrics(13.62, 559.1, 572.72, Terrain(0.7, 0.3, 0.4))


def test_top_factors_ties_keep_declared_order():
    scores = SubScores(range=5, trunk=5, family=0, terrain=5, efficiency=1)
    assert [k for k, _ in top_factors(scores)] == ["range", "trunk"]


def test_top_factors_sorted_descending():
    scores = SubScores(range=2, trunk=0, family=9, terrain=12, efficiency=3)
    assert [k for k, _ in top_factors(scores)] == ["terrain", "family"]


def test_runner_up_reason_precedence(make_vehicle):
    primary = make_vehicle("P", "sedan", price=30, trunk_liters=400, seats=5, efficiency=15)
    assert runner_up_reason(primary, make_vehicle("R", "suv", price=20)) == "is more affordable"
    assert runner_up_reason(primary, make_vehicle("R", "suv", price=40)) == \
        "offers a different powertrain option (suv)"
    assert runner_up_reason(primary, make_vehicle("R", "sedan", price=30, trunk_liters=500)) == \
        "provides more cargo space"
    assert runner_up_reason(primary, make_vehicle("R", "sedan", price=30, seats=7)) == \
        "offers more seating capacity"
    assert runner_up_reason(primary, make_vehicle("R", "sedan", price=30, efficiency=16)) == \
        "has better fuel efficiency"
    assert runner_up_reason(primary, make_vehicle("R", "sedan", price=30)) == "is a solid alternative"


def test_summary_contents(make_vehicle):
    primary = make_vehicle("Tesla Model 3", "electric", range_km=576, efficiency=6.9, price=42)
    runner = make_vehicle("Nissan Leaf", "electric", price=28)
    scores = SubScores(range=10, trunk=0, family=0, terrain=9.5, efficiency=14.8)
    text = build_summary(METRICS, primary, scores, runner, 6.5, Habits())

    assert text.startswith("Based on your input, your daily commute is 13.6 km")
    assert "holiday trip is 559.1 km" in text
    assert "totaling 572.7 km" in text
    assert "because it offers excellent fuel efficiency (6.9 km/kWh) and provides sufficient range (576 km)" in text
    assert "As a runner-up, we suggest the Nissan Leaf, which is more affordable." in text
    assert text.endswith("would be $6.50.")


def test_summary_same_runner_up_and_habits(make_vehicle):
    v = make_vehicle("Only", "minivan", trunk_liters=1000)
    scores = SubScores(range=10, trunk=10, family=10, terrain=8, efficiency=2)
    text = build_summary(METRICS, v, scores, v, 12.0, Habits(has_kids=True, trunk_preference=True))
    assert "runner-up" not in text
    assert "it offers excellent range (600 km) for your needs and offers good cargo space (1000 liters)" in text
    assert text.endswith(
        "This recommendation accounts for your family needs"
        " and prioritizes vehicles with larger cargo capacity."
    )
