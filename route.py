# =============================================================================
# route.py - Route Controller
# =============================================================================
# Decides WHEN the robot's route has to be worked out again, runs the chosen
# search, and keeps track of how far along the route the robot has got.
#
# A new route is planned (always from scratch, from the robot's last
# confirmed cell) whenever:
#
#   - a new goal is clicked
#   - an obstacle is toggled while a goal is set
#   - the algorithm is switched while a goal is set
#   - a layout file is loaded while a goal is set
#
# STATES:
#   "no_destination" - nothing to do, no goal set
#   "planning"       - a search is running (only ever seen mid-call)
#   "following"      - a route is held; the robot drives it waypoint by
#                      waypoint. An empty route here means "no way through
#                      right now": the goal stays set and the next event
#                      that triggers a replan tries again.
#
# Everything happens in one thread: a replan always finishes before the
# caller's next advance().
# =============================================================================

import layout
from metrics import MetricsTracker
from pathfinder import ALGORITHMS, ALGORITHM_LABELS, ASTAR, BFS, find_path

NO_DESTINATION = "no_destination"
PLANNING       = "planning"
FOLLOWING      = "following"


class RouteController:
    """
    Owns the goal, the current route and the robot's progress along it.
    """

    def __init__(self, grid, start=(0, 0), algorithm=BFS, metrics=None):
        """
        grid      - the Grid object searched on (shared with the front end)
        start     - (col, row) the robot starts on
        algorithm - "bfs" or "astar"
        metrics   - optional MetricsTracker, a fresh one is made if omitted
        """
        if algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}"
            )
        if not grid.in_bounds(start):
            raise ValueError(f"Start cell {start} is outside the grid")

        self.grid      = grid
        self.algorithm = algorithm
        self.metrics   = metrics if metrics is not None else MetricsTracker()

        # Last cell the robot has been confirmed standing on
        self.position = start

        self.state = NO_DESTINATION
        self.goal  = None

        # Route being followed - read-only for everyone else
        self.path       = ()
        self.path_index = 0

    # =========================================================================
    # Read-only views for the front end
    # =========================================================================

    @property
    def has_destination(self):
        return self.goal is not None

    @property
    def algorithm_label(self):
        return ALGORITHM_LABELS[self.algorithm]

    def next_waypoint(self):
        """Return the next cell the robot should drive to, or None."""
        if self.state == FOLLOWING and self.path_index < len(self.path):
            return self.path[self.path_index]
        return None

    def remaining(self):
        """Cells of the route still ahead of the robot."""
        return self.path[self.path_index:]

    def is_finished(self):
        """True once there is nothing left to drive on the current route."""
        return self.path_index >= len(self.path)

    # =========================================================================
    # Input events
    # =========================================================================

    def set_goal(self, cell):
        """
        Pick a new destination and plan a route to it.
        Cells that are blocked or off the floor are ignored.
        Returns True if the goal was accepted.
        """
        if not self.grid.is_traversable(cell):
            print(f"  [Route] Ignoring goal {cell}: not a free cell")
            return False
        self.goal = cell
        self._replan("goal")
        return True

    def toggle_algorithm(self):
        """Switch BFS <-> A*, replanning at once if a goal is set."""
        self.algorithm = ASTAR if self.algorithm == BFS else BFS
        print(f"  [Route] Algorithm is now {self.algorithm_label}")
        if self.has_destination:
            self._replan("algorithm")

    def toggle_obstacle(self, cell):
        """Flip an obstacle on the grid, then react to the change."""
        if not self.grid.toggle_obstacle(cell):
            return False
        self.obstacle_changed()
        return True

    def obstacle_changed(self):
        """Call after the grid has been edited."""
        if self.has_destination:
            self._replan("obstacle")

    def layout_loaded(self):
        """Call after the whole grid has been replaced."""
        if self.has_destination:
            self._replan("layout")

    def reset(self):
        """Forget the goal and the route. The robot stays where it is."""
        self.state      = NO_DESTINATION
        self.goal       = None
        self.path       = ()
        self.path_index = 0

    def advance(self, cell):
        """
        Called by the motion side when the robot arrives on a cell.
        Only an arrival at the current waypoint moves progress on.
        Returns True if it did.
        """
        if self.next_waypoint() != cell:
            return False
        self.position    = cell
        self.path_index += 1
        self.metrics.record_step()
        return True

    # =========================================================================
    # Layout persistence
    # =========================================================================

    def save_layout(self, filename):
        """Write the grid to filename. Returns False (and says why) on failure."""
        try:
            layout.save_layout(self.grid, filename)
        except layout.LayoutIOError as e:
            print(f"  [Layout] Save failed: {e}")
            return False
        print(f"  [Layout] Saved to {filename}")
        return True

    def load_layout(self, filename):
        """
        Replace the grid with the layout in filename and replan.
        On any failure the grid is left exactly as it was.
        """
        try:
            cells = layout.load_layout(filename, self.grid.rows, self.grid.cols)
            self.grid.replace_all(cells)
        except (layout.LayoutIOError, ValueError) as e:
            print(f"  [Layout] Load failed: {e}")
            return False
        print(f"  [Layout] Loaded from {filename}")
        self.layout_loaded()
        return True

    # =========================================================================
    # Private helpers
    # =========================================================================

    def _replan(self, trigger):
        """Full search from the robot's current cell to the goal."""
        self.state = PLANNING
        stats = {}
        path  = find_path(self.grid, self.position, self.goal, self.algorithm, stats)

        self.path       = tuple(path)
        self.path_index = 0
        self.state      = FOLLOWING

        self.metrics.record_plan(trigger, self.algorithm, stats)
        self.metrics.print_plan(trigger, self.algorithm, stats)
