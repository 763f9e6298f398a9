"""Command line entry point."""

import argparse
import sys
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

from awsdata import __version__
from awsdata.config.loader import load_config
from awsdata.domain.base.exceptions import DomainException
from awsdata.infrastructure.logging.logger import get_logger, setup_logging
from awsdata.providers.aws.data_sources import rds_orderable_db_instance
from awsdata.providers.aws.infrastructure.aws_client import AWSClient
from awsdata.providers.aws.registry import read_data_source
from awsdata.providers.aws.waiters.lex_status import lex_slot_type_status

logger = get_logger(__name__)

_console = Console()
_error_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="awsdata",
        description="Read-only AWS data lookups",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Settings file (TOML, JSON or YAML)")
    parser.add_argument("--region", help="AWS region")
    parser.add_argument("--profile", help="AWS named profile")
    parser.add_argument("--endpoint-url", help="Override the AWS endpoint URL")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level",
    )
    parser.add_argument(
        "--log-json", action="store_true", default=None, help="Emit log records as JSON"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    rds = subparsers.add_parser(
        "rds-orderable-db-instance",
        help="Resolve one orderable RDS DB instance option",
    )
    rds.add_argument("--engine", required=True, help="DB engine, e.g. mysql")
    rds.add_argument("--engine-version", help="Engine version")
    rds.add_argument("--db-instance-class", help="DB instance class")
    rds.add_argument("--license-model", help="License model")
    rds.add_argument("--availability-zone-group", help="Availability zone group")
    rds.add_argument("--storage-type", help="Storage type, matched exactly after retrieval")
    rds.add_argument(
        "--vpc",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only options offered (or not offered) in a VPC",
    )
    rds.add_argument(
        "--preferred-db-instance-class",
        dest="preferred_db_instance_classes",
        action="append",
        default=[],
        metavar="CLASS",
        help="Preferred instance class, may be repeated; earlier wins",
    )

    lex = subparsers.add_parser(
        "lex-slot-type-status",
        help="Report whether a Lex slot type exists",
    )
    lex.add_argument("name", help="Slot type name")

    return parser


def _rds_config(args: argparse.Namespace) -> dict[str, Any]:
    config: dict[str, Any] = {
        "engine": args.engine,
        "engine_version": args.engine_version,
        "db_instance_class": args.db_instance_class,
        "license_model": args.license_model,
        "availability_zone_group": args.availability_zone_group,
        "storage_type": args.storage_type,
        "vpc": args.vpc,
    }
    if args.preferred_db_instance_classes:
        config["preferred_db_instance_classes"] = args.preferred_db_instance_classes
    return {key: value for key, value in config.items() if value is not None}


def run(args: argparse.Namespace, aws_client: Optional[AWSClient] = None) -> int:
    """Execute a parsed command and print its result as JSON."""
    app_config = load_config(
        args.config,
        overrides={
            "aws": {
                "region": args.region,
                "profile": args.profile,
                "endpoint_url": args.endpoint_url,
            },
            "logging": {"level": args.log_level, "json_format": args.log_json},
        },
    )
    setup_logging(app_config.logging.level, app_config.logging.json_format)

    aws_client = aws_client or AWSClient(app_config.aws)

    if args.command == "rds-orderable-db-instance":
        data = read_data_source(rds_orderable_db_instance.NAME, _rds_config(args), aws_client)
        _console.print_json(data=data.to_dict())
        return 0

    if args.command == "lex-slot-type-status":
        _, state, error = lex_slot_type_status(aws_client, args.name)()
        _console.print_json(
            data={
                "name": args.name,
                "state": state,
                "error": error.to_dict() if isinstance(error, DomainException) else None,
            }
        )
        return 0 if error is None else 1

    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Optional[list[str]] = None, aws_client: Optional[AWSClient] = None) -> int:
    """Parse argv, run the command and return the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        return run(args, aws_client)
    except DomainException as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _error_console.print(
            f"[red]Error:[/red] {escape(str(e))}", markup=True, highlight=False, soft_wrap=True
        )
        return 1


def cli_main() -> None:
    """Entry point function for console scripts."""
    sys.exit(main())
