import sys
from argparse import ArgumentParser, RawTextHelpFormatter
from decimal import Decimal, InvalidOperation

from decimal_validator.app.queries import ValidateDecimalQuery
from decimal_validator.domain.exceptions import DecimalParseError
from decimal_validator.domain.services import DecimalValidator
from decimal_validator.domain.values import BigDecimal, ValidationRules
from decimal_validator.shared.config import get_settings
from decimal_validator.shared.di import get_container
from decimal_validator.shared.logging import configure_logging, get_logger
from decimal_validator.shared.observability import generate_metrics, write_metrics_textfile

settings = get_settings()

configure_logging(
    log_level=settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS
)

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_UNPARSABLE = 2


def decimal_argument(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as e:
        raise ValueError(f"not a decimal: {value}") from e


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Decimal Validator Entrypoint",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a decimal value against digit count and range rules.\n"
             "Omitted rules fall back to the configured defaults."
    )
    validate_parser.add_argument("value", help="Decimal literal, e.g. 124.2 or 1E8")
    validate_parser.add_argument("--min-decimal-places", type=int, default=None)
    validate_parser.add_argument("--max-decimal-places", type=int, default=None)
    validate_parser.add_argument("--max-fractional-places", type=int, default=None)
    validate_parser.add_argument("--min-value", type=decimal_argument, default=None)
    validate_parser.add_argument("--max-value", type=decimal_argument, default=None)
    validate_parser.add_argument(
        "--no-check-fractions",
        dest="check_fractions",
        action="store_false",
        default=None,
        help="Truncate the value to its integer part and skip the fractional digit check.",
    )
    validate_parser.add_argument(
        "--print-metrics",
        action="store_true",
        help="Print the collected metrics in Prometheus text format (needs ENABLE_METRICS).",
    )
    validate_parser.set_defaults(func=run_validate)

    return parser


def build_rules(args, defaults: ValidationRules) -> ValidationRules:
    def pick(arg_value, default):
        return default if arg_value is None else arg_value

    return ValidationRules(
        min_decimal_places=pick(args.min_decimal_places, defaults.min_decimal_places),
        max_decimal_places=pick(args.max_decimal_places, defaults.max_decimal_places),
        max_fractional_places=pick(args.max_fractional_places, defaults.max_fractional_places),
        min_value=pick(args.min_value, defaults.min_value),
        max_value=pick(args.max_value, defaults.max_value),
    )


def run_validate(args) -> int:
    container = get_container()

    if args.check_fractions is not None:
        container.validator.override(DecimalValidator(check_fractions=args.check_fractions))

    handler = container.validate_decimal_query_handler()
    rules = build_rules(args, container.default_rules())

    try:
        value = BigDecimal.of(args.value)
    except DecimalParseError as e:
        logger.warning("decimal_unparsable", value=args.value, error=str(e))
        print(str(e))
        return EXIT_UNPARSABLE

    result = handler.handle(ValidateDecimalQuery(value=value, rules=rules))

    print("valid" if result.is_valid else result.message)
    export_metrics(args, container)

    return EXIT_VALID if result.is_valid else EXIT_INVALID


def export_metrics(args, container) -> None:
    if container.metrics() is None:
        if args.print_metrics:
            logger.warning("metrics_disabled", hint="set ENABLE_METRICS=true")
        return

    if args.print_metrics:
        content, _ = generate_metrics()
        print(content, end="")

    textfile = get_settings().METRICS_TEXTFILE
    if textfile:
        write_metrics_textfile(textfile)


def main() -> None:
    parser = setup_arg_parser()
    args = parser.parse_args()

    logger.info("command_starting", command=args.command)

    try:
        exit_code = args.func(args)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True
        )
        sys.exit(1)

    logger.info("command_completed", command=args.command, exit_code=exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
