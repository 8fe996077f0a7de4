import logging
import time
from pathlib import Path
from tqdm import tqdm
from core.mangler import MangleConfig, mangle
from utils.file_io import load_wordlist, open_output, write_variants
from utils.reporter import PURPLE, RESET


class Mangler:
    def __init__(self, args):
        self.input_file = Path(args.file)
        self.output_file = Path(args.output)
        self.config = MangleConfig.from_args(args)
        self.encoding = getattr(args, "encoding", "utf-8")
        self.truncate = not getattr(args, "keep_existing", False)
        self.quiet = getattr(args, "quiet", False)
        self.log_dir = getattr(args, "log_dir", None)


    def run(self):
        """
        Mangle every line of the wordlist into the output file.

        The whole wordlist is read before the output is opened. Each line's
        variants are written and flushed before the next line is mangled.

        Returns:
            dict: counts for the run summary.
        """
        start_time = time.time()
        words = load_wordlist(self.input_file, self.encoding)

        if not self.config.any_enabled:
            logging.warning("No transformations enabled; output will be empty.")

        summary_log = {
            "input_file": self.input_file,
            "output_file": self.output_file,
            "transformations": self.config.enabled(),
            "lines": len(words),
            "generated": 0,
            "duplicates": 0,
            "written": 0,
        }

        # the number of variants before dedup depends only on the config
        per_word = self.config.variant_count

        with open_output(self.output_file, self.encoding, self.truncate) as output:
            with tqdm(words, desc=f"{PURPLE}Mangling{RESET}", total=len(words),
                      unit="line", ncols=100, leave=False, ascii=True,
                      disable=self.quiet) as progress_bar:
                for word in progress_bar:
                    variants = mangle(word, self.config)
                    summary_log["generated"] += per_word
                    summary_log["duplicates"] += per_word - len(variants)
                    summary_log["written"] += write_variants(output, variants)

        summary_log["elapsed_time"] = time.time() - start_time
        logging.info(
            f"Mangled {summary_log['lines']} lines into {summary_log['written']} variants "
            f"({summary_log['duplicates']} duplicates dropped)"
        )
        return summary_log
