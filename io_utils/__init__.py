from .ena_xml import iter_sample_elements, iter_samples, parse_sample
from .read import find_files

__all__ = [
    "find_files",
    "iter_sample_elements",
    "iter_samples",
    "parse_sample",
]
