# neki_lang/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser
from argparse import Namespace

# Local imports
from neki_lang import __version__


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    parser = ArgumentParser(
        prog="neki-lang",
        description="Generate language template patches marking translatable text in mod assets",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # gen
    gen_parser = subparsers.add_parser("gen", help="Generate language template")
    gen_parser.add_argument("--input", "-i", required=True, help="Input directory (mod folder)")
    gen_parser.add_argument("--output", "-o", required=True, help="Output directory")
    gen_parser.add_argument(
        "--test",
        "-t",
        action="store_true",
        help="Generate a test operation for every replace operation",
    )
    _add_config_dir_argument(gen_parser)

    # Logging options
    gen_parser.add_argument("--log-file", default=None, help="Also log to this file")
    gen_parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (default: INFO, -v: DEBUG)",
    )
    gen_parser.add_argument("--silent", action="store_true", help="Suppress all console output")

    # init
    init_parser = subparsers.add_parser(
        "init", help="Write the built-in configuration files for editing"
    )
    init_parser.add_argument(
        "--force", "-f", action="store_true", help="Overwrite existing config files"
    )
    _add_config_dir_argument(init_parser)

    return parser


def _add_config_dir_argument(parser: ArgumentParser) -> None:
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Directory holding dirs_config.json and regex_config.json (default: current directory)",
    )


def get_log_level(args: Namespace) -> str:
    """Map the verbosity count of the gen command to a logging level name"""
    if getattr(args, "verbose", 0) >= 1:
        return "DEBUG"
    return "INFO"
