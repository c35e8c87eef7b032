import argparse
import logging
import sys
from pathlib import Path

from normviz.domain.entities.state import ExplorerState
from normviz.infrastructure.cli.report import render_comparison, render_report
from normviz.infrastructure.config.config_loader import ConfigLoader, LoggingConfig, RandomConfig
from normviz.infrastructure.di.container import Container
from normviz.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _load_settings(args):
    if args.config is None:
        return ExplorerState(), RandomConfig(), LoggingConfig()
    loader = ConfigLoader(Path(args.config))
    configs = loader.load_all_configs()
    return configs['state'], configs['random'], configs['logging']


def _apply_overrides(state: ExplorerState, random_cfg: RandomConfig, args):
    state = state.evolve(dims=state.dims.with_changes(m=args.m, k=args.k, n=args.n))
    if args.norm is not None:
        state = state.evolve(norm_type=args.norm)
    if args.init_a is not None or args.scale_a is not None:
        changes = {k: v for k, v in (('init_type', args.init_a), ('scale', args.scale_a)) if v is not None}
        state = state.evolve(config_a=state.config_a.with_changes(**changes))
    if args.init_b is not None or args.scale_b is not None:
        changes = {k: v for k, v in (('init_type', args.init_b), ('scale', args.scale_b)) if v is not None}
        state = state.evolve(config_b=state.config_b.with_changes(**changes))
    if args.seed is not None:
        random_cfg = RandomConfig(seed=args.seed)
    return state, random_cfg


def _build_container(args) -> Container:
    state, random_cfg, logging_cfg = _load_settings(args)
    state, random_cfg = _apply_overrides(state, random_cfg, args)
    setup_logging(logging.DEBUG if args.verbose else logging_cfg.level_number, logging_cfg.log_file)

    container = Container()
    container.register_configs(state, random_cfg, logging_cfg)
    return container


def _cmd_report(args) -> int:
    controller = _build_container(args).get_controller()
    print(render_report(controller, show_matrices=args.show_matrices))
    return 0


def _cmd_compare(args) -> int:
    controller = _build_container(args).get_controller()
    print(render_comparison(controller))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Explore how initialization and scaling affect activation norms of C = A.B")
    parser.add_argument("command", choices=["report", "compare"], help="Action to perform")
    parser.add_argument("--config", default=None, help="Path to YAML config (defaults built in)")
    parser.add_argument("--m", type=float, default=None, help="Rows of A and C")
    parser.add_argument("--k", type=float, default=None, help="Shared dimension")
    parser.add_argument("--n", type=float, default=None, help="Columns of B and C")
    parser.add_argument("--norm", choices=["RMS", "L2", "L1"], default=None, help="Norm metric")
    parser.add_argument("--init-a", default=None, help="Initialization of A (xavier, normal, constant)")
    parser.add_argument("--init-b", default=None, help="Initialization of B (xavier, normal, constant)")
    parser.add_argument("--scale-a", type=float, default=None, help="Scale factor of A")
    parser.add_argument("--scale-b", type=float, default=None, help="Scale factor of B")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible matrices")
    parser.add_argument("--show-matrices", action="store_true", help="Print A, B and C")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(argv)

    try:
        if args.command == "report":
            return _cmd_report(args)
        if args.command == "compare":
            return _cmd_compare(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
