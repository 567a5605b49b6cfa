from __future__ import annotations

import argparse
from typing import Sequence

import uvicorn
from fastapi import FastAPI

from app import create_app
from domain.models import AppConfig
from domain.ports import LoggerPort
from domain.services import JobTrackerService
from infra.auth import StaticTokenVerifier
from infra.config import FileSystemConfigProvider
from infra.persistence import InMemoryTrackedJobRepository
from infra.runtime import StructuredLogger, SystemClock, UuidIdGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="job-tracker")
    sub = parser.add_subparsers(dest="command", required=True)

    serve_p = sub.add_parser("serve", help="Run the job tracker HTTP API")
    serve_p.add_argument("--config-dir", default="./config", help="Path to config folder")
    serve_p.add_argument("--host", default=None, help="Override HOST from config.json")
    serve_p.add_argument("--port", type=int, default=None, help="Override PORT from config.json")

    check_p = sub.add_parser("check-config", help="Validate config.json and exit")
    check_p.add_argument("--config-dir", default="./config", help="Path to config folder")
    return parser


def build_app(config: AppConfig, logger: LoggerPort) -> FastAPI:
    """Wire the in-memory store, runtime adapters and HTTP layer together."""
    service = JobTrackerService(
        repo=InMemoryTrackedJobRepository(),
        clock=SystemClock(),
        id_generator=UuidIdGenerator(),
        logger=logger,
    )
    return create_app(
        service=service,
        token_verifier=StaticTokenVerifier(config.api_tokens),
        logger=logger,
        allowed_origins=config.allowed_origins,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config_provider = FileSystemConfigProvider(args.config_dir)

    errors = config_provider.validate()
    if errors:
        print("Config validation failed:")
        for err in errors:
            print(f"  - {err}")
        return 1

    cfg = config_provider.get_config()

    if args.command == "check-config":
        print(f"Config OK: {len(cfg.api_tokens)} API token(s), listening on {cfg.host}:{cfg.port}")
        print(f"Debug mode: {'ON' if cfg.debug_mode else 'OFF'}")
        return 0

    if args.command == "serve":
        return _handle_serve(args, cfg)

    raise SystemExit(f"Unsupported command: {args.command}")


def _handle_serve(args: argparse.Namespace, cfg: AppConfig) -> int:
    logger = StructuredLogger()
    host = args.host or cfg.host
    port = args.port or cfg.port

    app = build_app(cfg, logger)
    logger.info("Starting job tracker API", host=host, port=port, debug=cfg.debug_mode)
    uvicorn.run(app, host=host, port=port, log_level="debug" if cfg.debug_mode else "info")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
