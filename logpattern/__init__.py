"""logpattern - Log format extraction from clusters of similar logs."""

from logpattern.logging_config import setup_logging

# Set up logging configuration
setup_logging()

# Version of the logpattern package
__version__ = "0.1.0"

# Import main components
from logpattern.cluster import Chunk, Log, Cluster
from logpattern.errors import LogPatternError, InvalidInputError, StructuralMismatchError
from logpattern.segment import Segment, FixedSegment, VariableSegment
from logpattern.format import Format, gen_format
from logpattern.summary import gen_formats, summarize_formats

__all__ = [
    'Chunk',
    'Log',
    'Cluster',
    'LogPatternError',
    'InvalidInputError',
    'StructuralMismatchError',
    'Segment',
    'FixedSegment',
    'VariableSegment',
    'Format',
    'gen_format',
    'gen_formats',
    'summarize_formats',
]
