"""Sample data generators."""

from ypbank.generators.base import BaseGenerator
from ypbank.generators.record import RecordGenerator, write_sample_files

__all__ = ["BaseGenerator", "RecordGenerator", "write_sample_files"]
