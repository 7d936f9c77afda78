# =============================================================================
# pathfinder.py - Shortest Path (BFS and A*)
# =============================================================================
# This file answers one question:
#   "What is the shortest route from the robot's cell to the goal cell?"
#
# Two algorithms are available and the user can switch between them:
#
#   BFS (breadth-first search)
#     - Spreads out one step at a time in every direction
#     - The first time it reaches the goal, that route is the shortest
#
#   A* (A-star)
#     - Keeps a list of cells to check, sorted by "most promising first"
#     - "Most promising" = steps taken so far + estimated steps remaining
#     - Finds a route of the same length, usually checking far fewer cells
#
# The robot moves UP, RIGHT, DOWN, LEFT only (no diagonal), and both
# searches try the neighbours in exactly that order. Together with the
# "oldest first" rule for A* ties this makes every search repeatable:
# same floor, same start, same goal -> same path.
#
# Both functions return the path WITHOUT the start cell and WITH the goal
# cell. An empty list means there is nothing to walk: the goal is blocked,
# unreachable, or the robot is already standing on it.
# =============================================================================

import heapq  # built-in Python tool - always gives us the smallest item first
import itertools
from collections import deque

BFS   = "bfs"
ASTAR = "astar"

ALGORITHM_LABELS = {BFS: "BFS", ASTAR: "A*"}

# (dcol, drow) - up, right, down, left
NEIGHBOUR_STEPS = [(0, -1), (1, 0), (0, 1), (-1, 0)]


def heuristic(a, b):
    """
    Estimate the distance between cell a and cell b.
    We use Manhattan distance: move in straight lines only, no diagonals.
    Example: from (0,0) to (3,4) = |3| + |4| = 7 steps minimum.
    It never overestimates on this grid, so A* still finds a shortest path.
    """
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class OpenSet:
    """
    The A* frontier: cells waiting to be checked, cheapest first.

    Entries with the same priority come out in the order they went in,
    so two runs over the same floor always pop cells in the same order.
    """

    def __init__(self):
        self._heap    = []
        self._counter = itertools.count()

    def push(self, item, priority):
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self):
        """Remove and return (item, priority) for the cheapest entry."""
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def __len__(self):
        return len(self._heap)


def find_path_bfs(grid, start, goal, stats=None):
    """
    Find a shortest path with breadth-first search.

    grid  - the Grid object (used to check if cells are traversable)
    start - (col, row) where the robot is now
    goal  - (col, row) where the robot wants to go
    stats - optional dict, filled in with search counters

    Returns a list of (col, row) steps after start up to goal (inclusive).
    Returns [] if there is nothing to walk.
    """
    if not _check_endpoints(grid, start, goal, BFS, stats):
        return []

    # came_from doubles as the visited set: a cell is marked the moment it
    # is queued, so it can never be queued twice
    came_from = {start: None}
    queue     = deque([start])
    expanded  = 0

    while queue:
        current = queue.popleft()
        expanded += 1

        # Reached the goal!
        if current == goal:
            path = _build_path(came_from, current)
            _record(stats, BFS, expanded, len(came_from), path, None)
            return path

        col, row = current
        for dc, dr in NEIGHBOUR_STEPS:
            neighbour = (col + dc, row + dr)
            if neighbour in came_from or not grid.is_traversable(neighbour):
                continue
            came_from[neighbour] = current
            queue.append(neighbour)

    _record(stats, BFS, expanded, len(came_from), [], "no_path")
    return []  # no path found


def find_path_astar(grid, start, goal, stats=None):
    """
    Find a shortest path with A*.

    Same arguments and return value as find_path_bfs().

    f = g + h, where g is the number of steps from start and h is the
    Manhattan distance to goal. A cell is marked visited when it is popped.
    If a cheaper route to a cell turns up later, the cell is simply pushed
    again with the better cost; the older, dearer entry is skipped when it
    finally comes out of the open set.
    """
    if not _check_endpoints(grid, start, goal, ASTAR, stats):
        return []

    open_set = OpenSet()
    open_set.push(start, heuristic(start, goal))

    # Track which cell we came from (to reconstruct the path at the end)
    came_from = {start: None}

    # Track the best known number of steps to reach each cell
    steps_to = {start: 0}

    visited  = set()
    expanded = 0

    while open_set:
        current, f = open_set.pop()

        # Stale entry - a cheaper route to this cell was pushed since
        if f > steps_to[current] + heuristic(current, goal):
            continue

        visited.add(current)
        expanded += 1

        # Reached the goal!
        if current == goal:
            path = _build_path(came_from, current)
            _record(stats, ASTAR, expanded, len(visited), path, None)
            return path

        col, row  = current
        new_steps = steps_to[current] + 1
        for dc, dr in NEIGHBOUR_STEPS:
            neighbour = (col + dc, row + dr)
            if not grid.is_traversable(neighbour):
                continue

            if neighbour not in steps_to or new_steps < steps_to[neighbour]:
                steps_to[neighbour]  = new_steps
                came_from[neighbour] = current
                open_set.push(neighbour, new_steps + heuristic(neighbour, goal))

    _record(stats, ASTAR, expanded, len(visited), [], "no_path")
    return []  # no path found


ALGORITHMS = {BFS: find_path_bfs, ASTAR: find_path_astar}


def find_path(grid, start, goal, algorithm=BFS, stats=None):
    """Run the search named by algorithm ("bfs" or "astar")."""
    try:
        search = ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}"
        ) from None
    return search(grid, start, goal, stats)


def _check_endpoints(grid, start, goal, planner, stats):
    """
    Cases that need no searching at all. Returns False (after filling in
    stats) when the search should stop straight away with [].

    The start cell only has to be on the floor: if an obstacle was dropped
    on the robot's own cell it can still drive off it.
    """
    if start == goal:
        reason = "start_is_goal"
    elif not grid.in_bounds(start):
        reason = "invalid_start"
    elif not grid.is_traversable(goal):
        reason = "goal_blocked"
    else:
        return True
    _record(stats, planner, 0, 0, [], reason)
    return False


def _record(stats, planner, expanded, visited, path, aborted):
    if stats is None:
        return
    stats["planner"]     = planner
    stats["expanded"]    = expanded
    stats["visited"]     = visited
    stats["path_length"] = len(path)
    stats["aborted"]     = aborted


def _build_path(came_from, current):
    """Trace backwards through came_from, stopping before the start cell."""
    path = []
    while came_from[current] is not None:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path
