#!/usr/bin/env python3
"""
Plotclock Workspace Tool

Enumerates the reachable marker positions of the reference linkage,
optionally checks forward/inverse agreement and plots the workspace.

Run: plotclock_workspace --round-trip --plot
"""

import argparse
import logging

from plotclock_config import limits as limits_config
from plotclock_config import visualization as vis_config
from .plotclock_forward import ForwardKinematics
from .plotclock_inverse import InverseKinematics
from .plotclock_linkage import LinkageConfig
from .plotclock_workspace import check_round_trip, enumerate_workspace, workspace_bounds

logger = logging.getLogger('plotclock_workspace')


def plot_workspace(config: LinkageConfig, points, bounds, output=None):
    """Scatter reachable marker positions with both servo shafts."""
    import matplotlib
    if output:
        matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from matplotlib.ticker import MultipleLocator

    min_x = min(bounds['min_x'], 0.0) - vis_config.PADDING_HORIZONTAL
    max_x = bounds['max_x'] + vis_config.PADDING_HORIZONTAL
    max_y = bounds['max_y'] + vis_config.PADDING_VERTICAL
    min_y = min(bounds['min_y'], 0.0) - vis_config.PADDING_VERTICAL

    fig, ax = plt.subplots(figsize=((max_x - min_x) / vis_config.UNITS_PER_INCH,
                                    (max_y - min_y) / vis_config.UNITS_PER_INCH))

    ax.scatter(points[:, 0], points[:, 1], s=vis_config.POINT_SIZE,
               c=vis_config.POINT_COLOR, label='Reachable marker positions')

    shafts = [config.servo1_shaft, config.servo2_shaft]
    ax.scatter([s.x for s in shafts], [s.y for s in shafts], s=vis_config.SHAFT_SIZE,
               c=vis_config.SHAFT_COLOR, label='Servo shafts')

    ax.axhline(0, color='black', linewidth=1)
    ax.axvline(0, color='black', linewidth=1)
    ax.set_xlim(min_x, max_x)
    ax.set_ylim(min_y, max_y)
    ax.set_aspect('equal')
    ax.xaxis.set_major_locator(MultipleLocator(vis_config.GRID_STEP))
    ax.yaxis.set_major_locator(MultipleLocator(vis_config.GRID_STEP))
    ax.grid(True, color=vis_config.GRID_COLOR)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title('Plotclock workspace')
    ax.legend(loc='lower left')

    plt.tight_layout()
    if output:
        plt.savefig(output, dpi=150)
        logger.info(f'Plot saved to {output}')
    else:
        plt.show()


def main(args=None):
    parser = argparse.ArgumentParser(description='Enumerate the plotclock marker workspace')
    parser.add_argument('--step', type=int, default=limits_config.WORKSPACE_STEP,
                        help='Servo angle increment in degrees (default: 1)')
    parser.add_argument('--round-trip', action='store_true',
                        help='Check that inverse kinematics recovers every reachable pose')
    parser.add_argument('--plot', action='store_true',
                        help='Show the workspace with matplotlib')
    parser.add_argument('--output', default=None,
                        help='Save the plot to this file instead of showing it')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every rejected pose')
    opts = parser.parse_args(args)

    logging.basicConfig(level=logging.DEBUG if opts.verbose else logging.INFO,
                        format='[%(levelname)s] [%(name)s]: %(message)s')

    config = LinkageConfig.from_config()
    forward = ForwardKinematics(config)
    inverse = InverseKinematics(config)

    logger.info('Plotclock workspace tool started')
    logger.info(f'  Arms: AB={config.AB} AF={config.AF} BG={config.BG}')
    logger.info(f'  Forearms: FC={config.FC} CG={config.CG} CD={config.CD} DCF={config.DCF}°')
    logger.info(f'  Limits: FCG<={config.max_FCG}° CFA<={config.max_CFA}° CGB<={config.max_CGB}°')
    logger.info(f'  Derived: FD={config.FD:.3f} LA={config.LA:.3f}')

    workspace = enumerate_workspace(forward, opts.step)
    if workspace['reachable_count'] == 0:
        logger.error('No reachable poses for this linkage')
        return 1

    bounds = workspace_bounds(workspace['points'])
    logger.info(f'  x: [{bounds["min_x"]:.2f}, {bounds["max_x"]:.2f}]')
    logger.info(f'  y: [{bounds["min_y"]:.2f}, {bounds["max_y"]:.2f}]')

    if opts.round_trip:
        result = check_round_trip(forward, inverse, step=opts.step)
        for servo1, servo2, solved in result['mismatched']:
            logger.debug(f'  mismatch servo1={servo1} servo2={servo2} -> {solved}')
        logger.info(f'  Mismatched poses: {len(result["mismatched"])}')

    if opts.plot or opts.output:
        plot_workspace(config, workspace['points'], bounds, opts.output)

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
