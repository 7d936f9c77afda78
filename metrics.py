# =============================================================================
# metrics.py - Planning Metrics
# =============================================================================
# Owns ALL metric state for a routing session.
# To add a new metric in the future:
#   1. Add its counter/state variables in __init__
#   2. Update it inside record_plan() or record_step()
#   3. Expose it as an attribute for draw_panel / print_summary
#
# Current metrics:
#   - plans         : searches run, split by what triggered them
#   - failed_plans  : searches that came back with no path
#   - expanded      : cells expanded, per algorithm (BFS vs A* comparison)
#   - distance      : cells the robot has actually driven
# =============================================================================

from pathfinder import ALGORITHM_LABELS, ASTAR, BFS


class MetricsTracker:
    """
    Tracks planning metrics and provides helper methods for
    logging and displaying them.
    """

    def __init__(self):
        # ── Plan counters ─────────────────────────────────────────────────────
        self.plans        = 0
        self.by_trigger   = {}
        self.failed_plans = 0

        # ── Search effort, per algorithm ──────────────────────────────────────
        self.expanded = {BFS: 0, ASTAR: 0}
        self.searches = {BFS: 0, ASTAR: 0}

        # ── Last plan, for the panel ──────────────────────────────────────────
        self.last_trigger  = None
        self.last_stats    = {}

        # ── Robot travel ──────────────────────────────────────────────────────
        self.distance = 0

    # -------------------------------------------------------------------------

    def record_plan(self, trigger, algorithm, stats):
        """
        Count one search. Call right after every replan.

        trigger   - what caused it: "goal", "obstacle", "algorithm", "layout"
        algorithm - "bfs" or "astar"
        stats     - the dict the search filled in
        """
        self.plans += 1
        self.by_trigger[trigger] = self.by_trigger.get(trigger, 0) + 1

        self.expanded[algorithm] = self.expanded.get(algorithm, 0) + stats.get("expanded", 0)
        self.searches[algorithm] = self.searches.get(algorithm, 0) + 1

        # start == goal is not a failure, the robot is already there
        if stats.get("aborted") not in (None, "start_is_goal"):
            self.failed_plans += 1

        self.last_trigger = trigger
        self.last_stats   = dict(stats)

    def record_step(self):
        """Count one cell driven. Call each time the robot reaches a waypoint."""
        self.distance += 1

    # -------------------------------------------------------------------------

    def average_expanded(self, algorithm):
        """Mean cells expanded per search for one algorithm (0.0 if unused)."""
        runs = self.searches.get(algorithm, 0)
        if runs == 0:
            return 0.0
        return self.expanded[algorithm] / runs

    # -------------------------------------------------------------------------

    def print_plan(self, trigger, algorithm, stats):
        """Print a one-line terminal summary for a plan."""
        outcome = stats.get("aborted") or f"{stats.get('path_length', 0)} steps"
        print(
            f"  [Route] {trigger:9s} {ALGORITHM_LABELS.get(algorithm, algorithm):3s}"
            f" | expanded={stats.get('expanded', 0):4d}"
            f" | {outcome}"
        )

    def print_summary(self):
        """Print final results when the session ends."""
        print("=" * 55)
        print("  SESSION COMPLETE")
        print(f"  Plans          : {self.plans}")
        for trigger in sorted(self.by_trigger):
            print(f"    {trigger:12s} : {self.by_trigger[trigger]}")
        print(f"  Failed plans   : {self.failed_plans}")
        for algorithm in (BFS, ASTAR):
            print(
                f"  {ALGORITHM_LABELS[algorithm]:3s} searches   : {self.searches[algorithm]}"
                f" (avg {self.average_expanded(algorithm):.1f} cells expanded)"
            )
        print(f"  Distance       : {self.distance} cells")
        print("=" * 55)
