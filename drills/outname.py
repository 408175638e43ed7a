"""Names of the output files written next to input files."""

SUFFIX = ".counts"


def compute_output_file_name(input_name):
    """Return the name of the counts file for ``input_name``."""
    return input_name + SUFFIX