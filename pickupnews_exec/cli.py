import asyncio
import sys
import argparse

from pickupnews.config import CONFIG
from pickupnews.errors import PickupNewsError
from pickupnews.logging_config import LOG_LEVELS, logger, set_log_level
from .handler import handle_request
from .request import RequestParameter


def setup_argparser():
    """Set up command line argument parser."""
    parser = argparse.ArgumentParser(description="Pickup news CLI: notify Slack when a keyword is in the news")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Overrides LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Search news for the keyword(s) and notify Slack")
    run_parser.add_argument("--from", dest="from_date", default="", help="First day of the range, YYYY-MM-DD (default: yesterday)")
    run_parser.add_argument("--to", dest="to_date", default="", help="Last day of the range, YYYY-MM-DD (default: today)")
    run_parser.add_argument("--bucket", default="", help="Bucket holding the keyword rule list")
    run_parser.add_argument("--key", default="", help="Object key of the keyword rule list")
    run_parser.add_argument("--keyword", default="", help="Inline keyword, used without --bucket/--key")
    run_parser.add_argument("--notice-lower-limit", type=int, default=0, help="Don't notify at or below this result count")

    return parser


def build_request_parameter(args: argparse.Namespace) -> RequestParameter:
    return RequestParameter(
        from_date=args.from_date,
        to_date=args.to_date,
        s3_bucket_name=args.bucket,
        s3_object_key=args.key,
        keyword=args.keyword,
        notice_lower_limit=args.notice_lower_limit,
    )


def main(argv=None):
    """Main CLI entry point."""
    parser = setup_argparser()
    args = parser.parse_args(argv)

    if args.command != "run":
        parser.print_help()
        sys.exit(1)

    try:
        set_log_level(args.log_level or CONFIG.LOG_LEVEL)
        result = asyncio.run(handle_request(build_request_parameter(args)))
    except PickupNewsError as e:
        logger.error(f"❌ {type(e).__name__}: {e}")
        sys.exit(1)

    print(result, end="" if result.endswith("\n") else "\n")


if __name__ == "__main__":
    main()
