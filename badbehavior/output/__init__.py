"""
Violation report rendering.
"""

from badbehavior.output.base import OutputGenerator
from badbehavior.output.json_output import JSONOutputGenerator
from badbehavior.output.text import TextOutputGenerator

GENERATORS = {
    'text': TextOutputGenerator,
    'json': JSONOutputGenerator,
}


def get_generator(output_format: str) -> OutputGenerator:
    """Generator for 'text' or 'json'. KeyError for anything else."""
    return GENERATORS[output_format]()


__all__ = [
    'GENERATORS',
    'JSONOutputGenerator',
    'OutputGenerator',
    'TextOutputGenerator',
    'get_generator',
]
