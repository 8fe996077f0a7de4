from datetime import datetime
import logging
from pathlib import Path


PURPLE, GREEN, YELLOW, RESET = "\033[0;35m", "\033[92m", "\033[0;33m", "\033[0m"
WIDTH = 49


def summary_lines(summary_log):
    return [
        f"{'File mangled:':<25}{summary_log['input_file']}",
        f"{'Output file:':<25}{summary_log['output_file']}",
        f"{'Transformations:':<25}{', '.join(summary_log['transformations']) or 'none'}",
        f"{'Lines read:':<25}{summary_log['lines']}",
        f"{'Variants generated:':<25}{summary_log['generated']}",
        f"{'Duplicates dropped:':<25}{summary_log['duplicates']}",
        f"{'Variants written:':<25}{summary_log['written']}",
        f"{'Elapsed time:':<25}{summary_log['elapsed_time']:.1f} seconds",
    ]


def display_summary(summary_log, log_dir=None):
    """Display a clean summary of the run and, if log_dir is set, append it to a log file."""
    lines = summary_lines(summary_log)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"mangle_log_{datetime.now().strftime('%Y%m%d')}.txt"

        with log_path.open("a", encoding="utf-8") as log:
            log_message = f"Run completed: {datetime.now().strftime('%Y-%m-%d %H:%M.%S')}"
            log.write("-" * WIDTH + "\n")
            log.write(f"{log_message.center(WIDTH)}\n")
            log.write("-" * WIDTH + "\n")
            for line in lines:
                log.write(line + "\n")
            log.write("-" * WIDTH + "\n\n")
        logging.debug(f"Summary appended to {log_path}")

    print("\n" + "-" * 15 + " Summary " + "-" * 15 + "\n")
    for line in lines:
        print(line)
    if summary_log["written"]:
        print(f"\n{GREEN}Mangled wordlist saved to '{summary_log['output_file']}'.{RESET}")
    else:
        print(f"\n{YELLOW}Nothing written. Are any transformations enabled?{RESET}")


class Reporter:
    def __init__(self, mangler):
        self.mangler = mangler

    def __str__(self):
        return (
            f"\n{PURPLE}Mangler Configuration:{RESET}\n"
            f"  Wordlist: {self.mangler.input_file}\n"
            f"  Output: {self.mangler.output_file}\n"
            f"  Encoding: {self.mangler.encoding}\n"
            f"  Truncate output: {self.mangler.truncate}\n"
            f"  Transformations: {', '.join(self.mangler.config.enabled()) or 'none'}\n"
        )

    def final_summary(self, summary_log):
        """Display final summary after processing is completed."""
        display_summary(summary_log, self.mangler.log_dir)
