# =============================================================================
# main.py - Run the Warehouse Robot
# =============================================================================
# Opens a window showing the warehouse floor and one robot.
#
#   Left click  - set the robot's destination (a route is planned at once)
#   Right click - add / remove an obstacle (the route is re-planned)
#   R           - reset: forget the destination
#   T           - toggle the search algorithm (BFS <-> A*)
#   S           - save the obstacle layout to a text file
#   L           - load the obstacle layout from the text file
#
# Usage:
#   python main.py                              # default 800x600, 40px cells
#   python main.py --algorithm astar            # start with A*
#   python main.py --cell-size 20               # finer grid (40x30)
#   python main.py --layout aisle_a.txt         # different layout file
#   python main.py --speed 4                    # faster robot
# =============================================================================

import argparse
import sys

import pygame

from agent      import Robot, step_robot, ROBOT_SPEED
from grid       import Grid, OBSTACLE
from metrics    import MetricsTracker
from pathfinder import ALGORITHMS, ALGORITHM_LABELS, BFS
from route      import RouteController


# =============================================================================
# CLI ARGUMENTS
# =============================================================================

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Warehouse robot route planner")
    parser.add_argument("--width",      type=int,   default=800,  help="Floor width in pixels (default 800)")
    parser.add_argument("--height",     type=int,   default=600,  help="Floor height in pixels (default 600)")
    parser.add_argument("--cell-size",  type=int,   default=40,   help="Pixel size per cell (default 40)")
    parser.add_argument("--layout",     type=str,   default="warehouse_layout.txt",
                        help="Layout file for S/L keys (default warehouse_layout.txt)")
    parser.add_argument("--algorithm",  choices=sorted(ALGORITHMS), default=BFS,
                        help="Search to start with (default bfs)")
    parser.add_argument("--speed",      type=float, default=ROBOT_SPEED, help="Robot pixels per frame (default 2.0)")
    parser.add_argument("--start-col",  type=int,   default=0,    help="Robot start column (default 0)")
    parser.add_argument("--start-row",  type=int,   default=0,    help="Robot start row (default 0)")
    parser.add_argument("--fps",        type=int,   default=60,   help="Frames per second (default 60)")
    return parser.parse_args(argv)


# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

PANEL_WIDTH = 260

# Colours
COL_BG          = ( 20,  20,  20)
COL_GRID_LINE   = ( 50,  50,  50)
COL_OBSTACLE    = (200,  50,  50)
COL_ROBOT       = ( 50, 200,  50)
COL_DESTINATION = ( 50,  50, 200)
COL_PATH        = (255, 215,   0)
COL_PANEL       = ( 20,  26,  36)
COL_DIVIDER     = ( 40,  50,  65)
COL_TITLE       = (100, 160, 255)
COL_WHITE       = (230, 235, 245)
COL_MUTED       = (100, 115, 135)
COL_WARN        = (220, 100,  50)


# =============================================================================
# DRAWING HELPERS
# =============================================================================

def cell_rect(cell, cell_size):
    col, row = cell
    return pygame.Rect(col * cell_size, row * cell_size, cell_size, cell_size)


def draw_grid(surface, grid, cell_size):
    """Grid lines, then obstacle cells."""
    width  = grid.cols * cell_size
    height = grid.rows * cell_size

    for r in range(grid.rows + 1):
        pygame.draw.line(surface, COL_GRID_LINE, (0, r * cell_size), (width, r * cell_size))
    for c in range(grid.cols + 1):
        pygame.draw.line(surface, COL_GRID_LINE, (c * cell_size, 0), (c * cell_size, height))

    for r in range(grid.rows):
        for c in range(grid.cols):
            if grid.cells[r][c] == OBSTACLE:
                pygame.draw.rect(surface, COL_OBSTACLE, cell_rect((c, r), cell_size))


def draw_route(surface, controller, robot, cell_size):
    """Path dots still ahead, destination marker, then the robot on top."""
    dot = cell_size // 3
    for cell in controller.remaining():
        rect = cell_rect(cell, cell_size)
        pygame.draw.rect(surface, COL_PATH,
                         pygame.Rect(rect.x + dot, rect.y + dot, dot, dot))

    if controller.has_destination:
        rect = cell_rect(controller.goal, cell_size)
        quarter = cell_size // 4
        pygame.draw.rect(surface, COL_DESTINATION,
                         pygame.Rect(rect.x + quarter, rect.y + quarter,
                                     cell_size // 2, cell_size // 2))

    radius = cell_size // 3
    pygame.draw.rect(surface, COL_ROBOT,
                     pygame.Rect(int(robot.x - radius), int(robot.y - radius),
                                 radius * 2, radius * 2))


def draw_panel(surface, grid, controller, metrics, cell_size,
               font_big, font_med, font_small):
    """Right-side info panel: controls, algorithm, route status, metrics."""
    panel_x = grid.cols * cell_size
    pygame.draw.rect(surface, COL_PANEL,
                     pygame.Rect(panel_x, 0, PANEL_WIDTH, surface.get_height()))
    pygame.draw.line(surface, COL_DIVIDER,
                     (panel_x, 0), (panel_x, surface.get_height()), 1)

    x           = panel_x + 16
    y           = 20
    divider_end = panel_x + PANEL_WIDTH - 16

    def divider():
        nonlocal y
        pygame.draw.line(surface, COL_DIVIDER, (x, y), (divider_end, y))
        y += 10

    def line(text, font=font_small, colour=COL_MUTED, step=18):
        nonlocal y
        surface.blit(font.render(text, True, colour), (x, y))
        y += step

    line("WAREHOUSE ROBOT", font_big, COL_TITLE, 36)

    divider()
    line("Left click : set destination")
    line("Right click: toggle obstacle")
    line("R: reset   T: toggle algorithm")
    line("S: save layout   L: load layout")

    divider()
    line(f"Algorithm: {controller.algorithm_label}", font_med, COL_WHITE, 22)

    state_label = {
        "no_destination": "No destination",
        "planning":       "Planning...",
        "following":      "Following route",
    }
    status = state_label.get(controller.state, controller.state)
    if controller.has_destination and not controller.path and controller.position != controller.goal:
        line("No path to destination", font_med, COL_WARN, 22)
    else:
        line(status, font_med, COL_WHITE, 22)
    line(f"Robot at {controller.position}")
    if controller.has_destination:
        line(f"Goal    {controller.goal}")
    line(f"Progress: {controller.path_index}/{len(controller.path)}")

    divider()
    line("METRICS")
    line(f"Plans: {metrics.plans}   Failed: {metrics.failed_plans}")
    if metrics.last_stats:
        line(f"Last: {ALGORITHM_LABELS[metrics.last_stats['planner']]}"
             f" expanded {metrics.last_stats['expanded']}")
    line(f"Obstacles: {grid.obstacle_count()}")
    line(f"Distance: {metrics.distance} cells")


# =============================================================================
# INPUT
# =============================================================================

def handle_event(event, controller, cell_size, layout_file):
    """
    Route one pygame event to the controller.
    Returns False when the window should close.
    """
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.MOUSEBUTTONDOWN:
        cell = (event.pos[0] // cell_size, event.pos[1] // cell_size)
        if not controller.grid.in_bounds(cell):
            return True   # click on the side panel
        if event.button == 1:
            controller.set_goal(cell)
        elif event.button == 3:
            controller.toggle_obstacle(cell)

    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_r:
            controller.reset()
        elif event.key == pygame.K_t:
            controller.toggle_algorithm()
        elif event.key == pygame.K_s:
            controller.save_layout(layout_file)
        elif event.key == pygame.K_l:
            controller.load_layout(layout_file)

    return True


# =============================================================================
# HEADLESS RUNNER - for scripted experiments
# =============================================================================

def run_headless(grid, start, goal, algorithm=BFS, speed=ROBOT_SPEED,
                 max_ticks=100000, toggles=None, cell_size=40):
    """
    Drive the robot from start to goal without any pygame graphics.

    Parameters
    ----------
    grid        - the Grid to drive on (edited in place by toggles)
    start, goal - (col, row) cells
    algorithm   - "bfs" or "astar"
    speed       - robot pixels per tick
    max_ticks   - safety cap to prevent infinite loops
    toggles     - optional list of (tick, cell): obstacle toggles applied
                  before the robot moves on that tick, like a right click
    cell_size   - pixel size of one cell

    Returns
    -------
    dict with keys:
        reached       - True if the robot ended on the goal
        ticks         - simulation ticks run
        position      - robot's final (col, row)
        distance      - cells driven
        plans         - searches run
        failed_plans  - searches that found no path
        expanded      - {"bfs": n, "astar": n} cells expanded in total
        path          - the final route the robot held
    """
    metrics    = MetricsTracker()
    controller = RouteController(grid, start=start, algorithm=algorithm, metrics=metrics)
    robot      = Robot(start, cell_size)
    pending    = sorted(toggles or [], key=lambda t: t[0])

    controller.set_goal(goal)

    ticks = 0
    while ticks < max_ticks:
        # Input first, so any replan lands before the robot moves
        while pending and pending[0][0] <= ticks:
            _, cell = pending.pop(0)
            controller.toggle_obstacle(cell)

        if controller.is_finished() and not pending:
            break

        step_robot(robot, controller, speed)
        ticks += 1

    return {
        "reached":      controller.has_destination and robot.grid_pos == goal,
        "ticks":        ticks,
        "position":     robot.grid_pos,
        "distance":     metrics.distance,
        "plans":        metrics.plans,
        "failed_plans": metrics.failed_plans,
        "expanded":     dict(metrics.expanded),
        "path":         list(controller.path),
    }


# =============================================================================
# MAIN
# =============================================================================

def main(argv=None):
    args = parse_args(argv)

    cell_size = args.cell_size
    grid      = Grid(rows=args.height // cell_size, cols=args.width // cell_size)
    start     = (args.start_col, args.start_row)
    if not grid.in_bounds(start):
        print(f"Start cell {start} is outside the {grid.cols}x{grid.rows} grid")
        sys.exit(2)

    metrics    = MetricsTracker()
    controller = RouteController(grid, start=start, algorithm=args.algorithm, metrics=metrics)
    robot      = Robot(start, cell_size)

    print("=" * 55)
    print("  Warehouse Robot")
    print("=" * 55)
    print(f"  Grid         : {grid.rows} rows x {grid.cols} cols ({cell_size}px cells)")
    print(f"  Robot start  : col {start[0]}, row {start[1]}")
    print(f"  Algorithm    : {controller.algorithm_label}")
    print(f"  Layout file  : {args.layout}")
    print(f"  Robot speed  : {args.speed} px/frame")
    print("=" * 55)

    pygame.init()

    screen = pygame.display.set_mode((grid.cols * cell_size + PANEL_WIDTH, max(grid.rows * cell_size, 400)))
    pygame.display.set_caption(f"Automated Warehouse Robot - {grid.cols}x{grid.rows}")

    font_big   = pygame.font.SysFont("monospace", 18, bold=True)
    font_med   = pygame.font.SysFont("monospace", 14)
    font_small = pygame.font.SysFont("monospace", 11)

    clock = pygame.time.Clock()

    running = True
    while running:

        for event in pygame.event.get():
            if not handle_event(event, controller, cell_size, args.layout):
                running = False

        step_robot(robot, controller, args.speed)

        screen.fill(COL_BG)
        draw_grid(screen, grid, cell_size)
        draw_route(screen, controller, robot, cell_size)
        draw_panel(screen, grid, controller, metrics, cell_size,
                   font_big, font_med, font_small)
        pygame.display.flip()
        clock.tick(args.fps)

    metrics.print_summary()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
