from .core import ACCEPTED, run_transcript, run_autoplay, run_batch
from .io import write_csv, write_manifest

__all__ = ["ACCEPTED", "run_transcript", "run_autoplay", "run_batch", "write_csv", "write_manifest"]
