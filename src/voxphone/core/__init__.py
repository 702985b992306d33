"""Core phonemization pipeline."""

from voxphone.core.corrections import CorrectionPipeline
from voxphone.core.phonemizer import Phonemizer
from voxphone.core.service import get_phonemizer, run_phonemize

__all__ = ["CorrectionPipeline", "Phonemizer", "get_phonemizer", "run_phonemize"]
