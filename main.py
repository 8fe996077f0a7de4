import logging
import sys
from core.driver import Mangler
from utils.cli import load_args, load_config
from utils.file_io import MangleIOError
from utils.reporter import Reporter


def configure_logging(verbose=False):
    # force: loading the config may already have logged through the default root handler
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )


def main(argv=None):
    # Load configuration from YAML file
    args = load_args(load_config(), argv) # <-- Add custom config if desired
    configure_logging(args.verbose)

    mangler = Mangler(args)
    reporter = Reporter(mangler)
    if not args.quiet:
        print(reporter)  # Calls the __str__ method to print the configuration

    try:
        summary_log = mangler.run()
    except MangleIOError as e:
        logging.debug("Run aborted", exc_info=True)
        print(f"mangler: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        reporter.final_summary(summary_log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
