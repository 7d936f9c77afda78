"""Offline tests for planning metrics.

Run:
  python3 test_metrics.py
"""

from metrics import MetricsTracker
from pathfinder import ASTAR, BFS


def test_counts_plans_by_trigger_and_algorithm():
    m = MetricsTracker()
    m.record_plan("goal", BFS, {"planner": BFS, "expanded": 30, "path_length": 6, "aborted": None})
    m.record_plan("obstacle", BFS, {"planner": BFS, "expanded": 10, "path_length": 0, "aborted": "no_path"})
    m.record_plan("algorithm", ASTAR, {"planner": ASTAR, "expanded": 7, "path_length": 6, "aborted": None})

    assert m.plans == 3
    assert m.by_trigger == {"goal": 1, "obstacle": 1, "algorithm": 1}
    assert m.failed_plans == 1
    assert m.expanded == {BFS: 40, ASTAR: 7}
    assert m.average_expanded(BFS) == 20.0
    assert m.average_expanded(ASTAR) == 7.0
    assert m.last_trigger == "algorithm"
    assert m.last_stats["planner"] == ASTAR


def test_already_at_goal_is_not_a_failure():
    m = MetricsTracker()
    m.record_plan("goal", BFS, {"planner": BFS, "expanded": 0, "path_length": 0, "aborted": "start_is_goal"})
    m.record_plan("goal", BFS, {"planner": BFS, "expanded": 0, "path_length": 0, "aborted": "goal_blocked"})
    assert m.failed_plans == 1


def test_average_with_no_searches():
    m = MetricsTracker()
    assert m.average_expanded(ASTAR) == 0.0


def test_distance_counts_steps():
    m = MetricsTracker()
    for _ in range(5):
        m.record_step()
    assert m.distance == 5


def test_printing_does_not_fail():
    m = MetricsTracker()
    stats = {"planner": BFS, "expanded": 3, "path_length": 2, "aborted": None}
    m.record_plan("goal", BFS, stats)
    m.print_plan("goal", BFS, stats)
    m.print_plan("layout", ASTAR, {"planner": ASTAR, "expanded": 0, "path_length": 0, "aborted": "goal_blocked"})
    m.print_summary()


if __name__ == '__main__':
    test_counts_plans_by_trigger_and_algorithm()
    test_already_at_goal_is_not_a_failure()
    test_average_with_no_searches()
    test_distance_counts_steps()
    test_printing_does_not_fail()
    print('OK')
