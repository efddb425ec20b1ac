"""Command-line entrypoint for resolving and inspecting server configuration."""

import argparse
import json
import logging
import sys

from skyconfig.bootstrap import bootstrap_load_configuration, bootstrap_log_parse_error
from skyconfig.config import (
    config_build_default,
    config_build_default_with_keys,
    config_load_resolver_settings,
    config_resolve,
)
from skyconfig.domain import ConfigurationValidationError, domain_configuration_to_payload


def main(argv: list[str] | None = None) -> None:
    """Run the selected command against the resolved configuration.

    Args:
        argv: Command-line arguments; defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when validation fails.
        SettingsLoadError: Raised when resolver settings are invalid.
    """

    argument_parser = argparse.ArgumentParser(description="Server configuration resolver")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="check",
        choices=("check", "show"),
        help="Runtime command: `check` resolves and validates, `show` prints the resolved public configuration",
        type=str,
    )
    argument_parser.add_argument(
        "--env-file",
        dest="env_file",
        type=str,
        help="Declarations file path; overrides SKYCONFIG_ENV_FILE",
    )
    argument_parser.add_argument(
        "--redact",
        action="store_true",
        help="Mask secret values in `show` output",
    )
    argument_parser.add_argument(
        "--with-keys",
        dest="with_keys",
        action="store_true",
        help="Start `show` from defaults with freshly generated API and master keys",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_resolver_settings()
    if parsed_arguments.env_file:
        settings = settings.model_copy(update={"env_file": parsed_arguments.env_file})
    logging.basicConfig(level=settings.log_level)

    if parsed_arguments.command == "show":
        base_configuration = config_build_default_with_keys() if parsed_arguments.with_keys else config_build_default()
        configuration = config_resolve(
            dotenv_path=settings.env_file,
            configuration=base_configuration,
            on_parse_error=bootstrap_log_parse_error if settings.report_parse_errors else None,
        )
        payload = domain_configuration_to_payload(configuration, redact=parsed_arguments.redact)
        print(json.dumps(payload, indent=2, sort_keys=True))
        return

    try:
        configuration = bootstrap_load_configuration(settings, configure_root_logger=False)
    except ConfigurationValidationError as error:
        print(f"Configuration invalid: {error}", file=sys.stderr)
        raise SystemExit(1) from error
    hook_state = "enabled" if configuration.log_hook.enabled else "disabled"
    print(f"Configuration valid for app {configuration.app.name!r} on {configuration.http.host}")
    print(f"Error-reporting hook {hook_state}")


if __name__ == "__main__":
    main()
