from .model import (
    BalanceResult,
    GridLayout,
    GridSpec,
    IntersectionSolution,
    PolarVector,
    SolverInput,
    TestRun,
    VectorSumResult,
    ViewportState,
)
from .parsing import ValidationError, build_solver_input, coerce_number, parse_form, parse_payload
from .solver import (
    calculate_vectors,
    normalize_angle,
    polar_to_cartesian,
    solve_balance,
    solve_intersection,
)
from .solver.compare import IterativeSolution, solve_iterative
from .config import ViewportConfig, get_viewport_config, set_viewport_config
from .viewport import Viewport
from .grid import build_grid, compute_nice_step, format_tick
from .events import PointerDown, PointerMove, PointerUp, Resize, Wheel
from .render import (
    LegendEntry,
    RecordingTarget,
    RenderTarget,
    SceneRenderer,
    Style,
    TikzRenderTarget,
    trilateration_legend,
    vector_legend,
)
from .controller import BalancingController, CalculationReport

__all__ = [
    'BalanceResult',
    'GridLayout',
    'GridSpec',
    'IntersectionSolution',
    'PolarVector',
    'SolverInput',
    'TestRun',
    'VectorSumResult',
    'ViewportState',
    'ValidationError',
    'build_solver_input',
    'coerce_number',
    'parse_form',
    'parse_payload',
    'calculate_vectors',
    'normalize_angle',
    'polar_to_cartesian',
    'solve_balance',
    'solve_intersection',
    'IterativeSolution',
    'solve_iterative',
    'ViewportConfig',
    'get_viewport_config',
    'set_viewport_config',
    'Viewport',
    'build_grid',
    'compute_nice_step',
    'format_tick',
    'PointerDown',
    'PointerMove',
    'PointerUp',
    'Resize',
    'Wheel',
    'LegendEntry',
    'RecordingTarget',
    'RenderTarget',
    'SceneRenderer',
    'Style',
    'TikzRenderTarget',
    'trilateration_legend',
    'vector_legend',
    'BalancingController',
    'CalculationReport',
]
