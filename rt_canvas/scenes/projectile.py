"""Plot the path of a projectile fired through gravity and wind.

The projectile starts at point(0, 1, 0) with velocity
normalize(vector(1, 1.8, 0)) * 11.25 and is ticked under gravity
vector(0, -0.1, 0) and wind vector(-0.01, 0, 0) until it lands (y <= 0).
Each position is plotted at (round(x), height - round(y)) in --colour.
Positions that fall outside the canvas are skipped.

A 900x550 canvas fits the whole trajectory.

Example:
    rt-canvas projectile 900 550 --colour 1 0 0 > projectile.ppm
"""

import logging
from dataclasses import dataclass

from rt_canvas.core.canvas import Canvas, write_pixel
from rt_canvas.core.tuples import Tuple, add, normalize, point, vector
from rt_canvas.core.types import Scene

logger = logging.getLogger(__name__)

scene = Scene(name='projectile', help='Plot a projectile trajectory under gravity and wind.')

MAX_TICKS = 10_000


@dataclass(frozen=True)
class Projectile:
    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    gravity: Tuple
    wind: Tuple


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one step."""
    position = add(proj.position, proj.velocity)
    velocity = add(add(proj.velocity, env.gravity), env.wind)
    return Projectile(position, velocity)


def trajectory(env: Environment, proj: Projectile) -> list[Tuple]:
    """Positions from launch until the projectile reaches the ground."""
    positions = [proj.position]
    for _ in range(MAX_TICKS):
        proj = tick(env, proj)
        positions.append(proj.position)
        if proj.position.y <= 0:
            break
    return positions


def default_launch() -> tuple[Environment, Projectile]:
    env = Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.01, 0, 0))
    proj = Projectile(position=point(0, 1, 0), velocity=normalize(vector(1, 1.8, 0)) * 11.25)
    return env, proj


@scene.draw
def draw(c: Canvas, args) -> Canvas:
    env, proj = default_launch()
    plotted = 0
    for pos in trajectory(env, proj):
        x = round(pos.x)
        y = c.height - round(pos.y)
        if 0 <= x < c.width and 0 <= y < c.height:
            write_pixel(c, x, y, args.colour)
            plotted += 1
    logger.debug('Plotted %d projectile positions', plotted)
    return c
