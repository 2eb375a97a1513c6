from .validator import validate_seed_words, pretty_summary
from .io import DEFAULT_SEED_WORDS, load_seed_words, read_lines, write_lines

__all__ = ["validate_seed_words", "pretty_summary", "DEFAULT_SEED_WORDS",
           "load_seed_words", "read_lines", "write_lines"]
