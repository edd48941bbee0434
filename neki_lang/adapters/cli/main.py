# neki_lang/adapters/cli/main.py

"""
neki_lang - CLI Main Module

Command-line interface generating language template patches from a mod
directory, and initializing the editable configuration files.
"""

# Standard library imports
from argparse import Namespace
from logging import getLogger
from sys import exit

# Third party imports
from pydantic import ValidationError

# Local imports
from neki_lang.adapters.cli.parser import create_argument_parser
from neki_lang.adapters.cli.parser import get_log_level
from neki_lang.application.models.config_models import GenerationOptions
from neki_lang.application.services import PatchGenerationService
from neki_lang.core.domain.exceptions import ConfigError
from neki_lang.core.domain.exceptions import ParseError
from neki_lang.infrastructure.config import ConfigLoader
from neki_lang.infrastructure.config import init_config_files
from neki_lang.infrastructure.logging import log_run_summary
from neki_lang.infrastructure.logging import setup_logging

logger = getLogger(__name__)


def run_generate(args: Namespace) -> None:
    """Run the gen command"""
    options = GenerationOptions(
        input_dir=args.input, output_dir=args.output, test_operations=args.test
    )
    service = PatchGenerationService(ConfigLoader(args.config_dir))
    stats = service.run(options)
    log_run_summary(stats, str(options.output_dir))


def run_init(args: Namespace) -> None:
    """Run the init command"""
    init_config_files(args.config_dir or ".", force=args.force)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(
        log_file=getattr(args, "log_file", None),
        log_level=get_log_level(args),
        silent=getattr(args, "silent", False),
    )

    try:
        if args.command == "gen":
            run_generate(args)
        else:
            run_init(args)
    except (ConfigError, ParseError, ValidationError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Error during {args.command}: {e}")
        exit(1)


if __name__ == "__main__":
    main()
