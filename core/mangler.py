from dataclasses import dataclass, fields


COMMON_TOKENS = ["pw", "pwd", "admin", "sys"]
PUNCTUATION = "!@$%^&*()"
YEAR_RANGE = range(1990, 2023 + 1)
DOUBLE_DIGIT_RANGE = range(1, 9 + 1)
TRIPLE_DIGIT_RANGE = range(1, 123 + 1)

SINGLE_VARIANT_FIELDS = [
    "double", "reverse", "capitalize", "lower", "upper", "swap_case", "suffix_ed", "suffix_ing",
]

# Command-line flag -> MangleConfig field
FLAG_MAP = {
    "double": "double",
    "reverse": "reverse",
    "capital": "capitalize",
    "lower": "lower",
    "upper": "upper",
    "swap": "swap_case",
    "ed": "suffix_ed",
    "ing": "suffix_ing",
    "common": "add_common_affixes",
    "punctuation": "add_punctuation",
    "years": "add_year_affixes",
    "pnb": "double_digit_prefix",
    "pna": "double_digit_suffix",
    "nb": "triple_digit_prefix",
    "na": "triple_digit_suffix",
}


@dataclass(frozen=True)
class MangleConfig:
    """Which transformations are active for a run. Never mutated once built."""
    double: bool = False
    reverse: bool = False
    capitalize: bool = False
    lower: bool = False
    upper: bool = False
    swap_case: bool = False
    suffix_ed: bool = False
    suffix_ing: bool = False
    add_common_affixes: bool = False
    add_punctuation: bool = False
    add_year_affixes: bool = False
    double_digit_prefix: bool = False
    double_digit_suffix: bool = False
    triple_digit_prefix: bool = False
    triple_digit_suffix: bool = False

    @classmethod
    def from_args(cls, args):
        """Build the config from parsed command-line arguments."""
        return cls(**{field: bool(getattr(args, flag, False)) for flag, field in FLAG_MAP.items()})

    @property
    def any_enabled(self):
        return any(getattr(self, f.name) for f in fields(self))

    @property
    def variant_count(self):
        """How many variants generate_variants yields per word, before dedup."""
        count = sum(getattr(self, name) for name in SINGLE_VARIANT_FIELDS)
        count += 2 * len(COMMON_TOKENS) * self.add_common_affixes
        count += len(PUNCTUATION) * self.add_punctuation
        count += 2 * len(YEAR_RANGE) * self.add_year_affixes
        count += len(DOUBLE_DIGIT_RANGE) * (self.double_digit_prefix + self.double_digit_suffix)
        count += len(TRIPLE_DIGIT_RANGE) * (self.triple_digit_prefix + self.triple_digit_suffix)
        return count

    def enabled(self):
        """Names of the active transformations, in declaration order."""
        return [f.name for f in fields(self) if getattr(self, f.name)]


def swap_case(word):
    # per character; str.swapcase() turns a final capital sigma into "\u03c2"
    return "".join(ch.lower() if ch.isupper() else ch.upper() if ch.islower() else ch for ch in word)


def capitalize_first(word):
    # str.capitalize() would also lowercase the rest of the word
    return word[:1].upper() + word[1:]


def generate_variants(word, config):
    """
    Yield every variant of `word` selected by `config`, before deduplication.

    Each transformation works on the original word; results are never chained.
    """
    if config.double:
        yield word + word
    if config.reverse:
        yield word[::-1]
    if config.capitalize:
        yield capitalize_first(word)
    if config.lower:
        yield word.lower()
    if config.upper:
        yield word.upper()
    if config.swap_case:
        yield swap_case(word)
    if config.suffix_ed:
        yield f"{word}ed"
    if config.suffix_ing:
        yield f"{word}ing"

    if config.add_common_affixes:
        for token in COMMON_TOKENS:
            yield f"{token}{word}"
            yield f"{word}{token}"

    if config.add_punctuation:
        for char in PUNCTUATION:
            yield f"{word}{char}"

    if config.add_year_affixes:
        for year in YEAR_RANGE:
            yield f"{year}{word}"
            yield f"{word}{year}"

    # Prefix and suffix are gated independently
    if config.double_digit_prefix or config.double_digit_suffix:
        for i in DOUBLE_DIGIT_RANGE:
            if config.double_digit_prefix:
                yield f"0{i}{word}"
            if config.double_digit_suffix:
                yield f"{word}0{i}"

    if config.triple_digit_prefix or config.triple_digit_suffix:
        for i in TRIPLE_DIGIT_RANGE:
            if config.triple_digit_prefix:
                yield f"{i}{word}"
            if config.triple_digit_suffix:
                yield f"{word}{i}"


def dedupe(variants):
    """Drop repeated strings, keeping the first occurrence of each in order."""
    return list(dict.fromkeys(variants))


def mangle(word, config):
    """Return the ordered, de-duplicated variants of a single word."""
    return dedupe(generate_variants(word, config))
