from .core import playable_words, run_case, run_batch, summarize
from .io import write_csv, write_manifest

__all__ = ["playable_words", "run_case", "run_batch", "summarize", "write_csv",
           "write_manifest"]
