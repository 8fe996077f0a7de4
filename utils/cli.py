import argparse
import logging
from pathlib import Path
import sys
import yaml


__version__ = "0.1.0"


def load_config(config_file=Path(__file__).parent.parent / "config.yaml"):
    """
    Load configuration options from a YAML file.
    """
    config_file = Path(config_file)
    if not config_file.exists():
        logging.debug(f"No config file at {config_file}")
        return {}
    with config_file.open("r") as file:
        return yaml.safe_load(file) or {}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="mangler",
        description="Mangles a given wordlist.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    # Input / output
    parser.add_argument("-f", "--file", required=True, type=Path, help="Path of the wordlist.")
    parser.add_argument("-o", "--output", required=True, type=Path, help="Path of the output mangled list.")
    parser.add_argument(
        "--keep-existing",
        action="store_true",
        help="Do not truncate the output file; leftover content past the new output remains."
    )
    parser.add_argument("--encoding", default="utf-8", help="Text encoding of the input and output (default: utf-8).")

    # Transformations
    parser.add_argument("-d", "--double", action="store_true", help="Duplicate words per line.")
    parser.add_argument("-c", "--capital", action="store_true", help="Capitalize words.")
    parser.add_argument("-s", "--swap", action="store_true", help="Swap case of words.")
    parser.add_argument("-e", "--ed", action="store_true", help="Add 'ed' to the end of each word.")
    parser.add_argument("-i", "--ing", action="store_true", help="Add 'ing' to the end of each word.")
    parser.add_argument("-u", "--upper", action="store_true", help="Uppercase words.")
    parser.add_argument("-l", "--lower", action="store_true", help="Lowercase words.")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse words.")
    parser.add_argument(
        "--punctuation",
        action="store_true",
        help="Add an assortment of punctuation to the end of words."
    )
    parser.add_argument("-y", "--years", action="store_true", help="Prefix and postfix the word with 1990..2023.")
    parser.add_argument("--na", action="store_true", help="Postfix the word with 1..123.")
    parser.add_argument("--nb", action="store_true", help="Prefix the word with 1..123.")
    parser.add_argument("--pna", action="store_true", help="Postfix the word with 01..09.")
    parser.add_argument("--pnb", action="store_true", help="Prefix the word with 01..09.")
    parser.add_argument(
        "-C", "--common",
        action="store_true",
        help="Prefix and postfix the word with common words like pw, pwd, admin and sys."
    )

    # Output verbosity
    parser.add_argument("-q", "--quiet", action="store_true", help="No banner, progress bar or summary.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def simulate_args(config):
    """Turn config entries into command-line arguments."""
    simulated_args = []
    for key, value in config.items():
        if key == "log_dir" or value is None or value is False:
            continue
        flag = f"--{key.replace('_', '-')}"
        if value is True:
            simulated_args.append(flag)
        else:
            simulated_args.extend([flag, str(value)])
    return simulated_args


def load_args(config=None, argv=None):
    """
    Parse command-line arguments, optionally overriding with config.

    The config only applies when no arguments are given at all.
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    # Handle Simulated Arguments Only When No CLI Arguments
    if config and not argv:
        argv = simulate_args(config)
        logging.debug(f"Simulated arguments: {argv}")

    args = parser.parse_args(argv)
    args.log_dir = config.get("log_dir") if config else None
    return args
