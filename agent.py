# =============================================================================
# agent.py - The Robot
# =============================================================================
# This file defines the robot that drives around the warehouse floor.
#
# The route controller thinks in whole cells. The robot on screen glides
# smoothly between them, so it keeps two positions:
#
#   x, y      - pixel position of the robot's centre (moves every frame)
#   grid_pos  - (col, row) of the last cell it fully arrived on
#
# Each frame the robot moves up to `speed` pixels toward the centre of its
# next waypoint. When it gets there it snaps onto the centre, grid_pos is
# updated, and the route controller is told so it can hand out the next
# waypoint.
# =============================================================================

import math

# Pixel size of one cell (800x600 window / 40px cells = 20x15 grid)
CELL_SIZE = 40

# Pixels moved per frame
ROBOT_SPEED = 2.0


def cell_centre(cell, cell_size=CELL_SIZE):
    """Pixel centre of a (col, row) cell."""
    col, row = cell
    return (col * cell_size + cell_size / 2, row * cell_size + cell_size / 2)


class Robot:
    """
    A warehouse robot that follows the route handed out by a RouteController.
    """

    def __init__(self, cell, cell_size=CELL_SIZE):
        """
        Put the robot in the middle of a cell.

        cell      - (col, row) to start on
        cell_size - pixel size of one grid cell
        """
        self.cell_size = cell_size
        self.grid_pos  = cell
        self.x, self.y = cell_centre(cell, cell_size)

    def move_toward(self, target, speed=ROBOT_SPEED):
        """
        Move up to `speed` pixels toward the centre of target.
        Returns True once the robot has arrived on target.
        """
        target_x, target_y = cell_centre(target, self.cell_size)

        dx   = target_x - self.x
        dy   = target_y - self.y
        dist = math.hypot(dx, dy)

        if dist > speed:
            self.x += speed * (dx / dist)
            self.y += speed * (dy / dist)
            return False

        # Close enough - snap onto the centre
        self.x, self.y = target_x, target_y
        self.grid_pos  = target
        return True


def step_robot(robot, controller, speed=ROBOT_SPEED):
    """
    Advance the robot by one frame along the controller's route.
    Called once per frame, after all input events have been handled.
    Returns the cell reached this frame, or None.
    """
    target = controller.next_waypoint()
    if target is None:
        return None

    if robot.move_toward(target, speed):
        controller.advance(target)
        return target
    return None
