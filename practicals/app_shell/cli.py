import argparse
import logging
import sys

from practicals.adapters.sqlite.migrator import SQLiteMigrator
from practicals.api.deps import Settings
from practicals.app_shell.config import ConfigError, validate_ops_rules
from practicals.rules.loader import load_rules

logger = logging.getLogger("cli")


def handle_check_rules(settings: Settings) -> int:
    try:
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules, settings.data_dir)
    except (FileNotFoundError, ValueError, ConfigError) as e:
        logger.error("Rules check failed: %s", e)
        return 1
    print(f"Rules OK: {settings.rules_path} (version {rules.project.rules_version})")
    return 0


def handle_migrate(settings: Settings) -> int:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    applied = SQLiteMigrator(settings.db_path).run_migrations()
    if applied:
        print(f"Applied {len(applied)} migration(s): {', '.join(applied)}")
    else:
        print("Database is up to date.")
    return 0


def handle_serve(settings: Settings, args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "practicals.api.main:app",
        host=args.host,
        port=args.port or settings.port,
        reload=args.reload,
    )
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Full-Stack Practicals CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve_parser.add_argument("--port", type=int, help="Port (defaults to $PORT or 3000)")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    # migrate
    subparsers.add_parser("migrate", help="Apply pending database migrations")

    # check-rules
    subparsers.add_parser("check-rules", help="Validate rules.yaml and the environment")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    settings = Settings()

    if args.command == "serve":
        code = handle_serve(settings, args)
    elif args.command == "migrate":
        code = handle_migrate(settings)
    else:
        code = handle_check_rules(settings)
    sys.exit(code)


if __name__ == "__main__":
    main()
