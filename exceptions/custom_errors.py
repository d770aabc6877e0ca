class InvalidTimeFormatError(Exception):
    """Raised when a wall-clock string is not a valid "HH:MM" value, a minute count falls outside a single day, or a "HH:MM-HH:MM" window is malformed."""

    pass


class UnmappedAnalysisTypeError(Exception):
    """Raised when a sample's analysis type has no entry in the analysis-type to specialty table."""

    def __init__(self, sample_id: str, analysis_type: str):
        self.sample_id = sample_id
        self.analysis_type = analysis_type
        super().__init__(
            f"Sample {sample_id!r} has analysis type {analysis_type!r} with no specialty mapping."
        )


class InputMismatchError(Exception):
    """Raised when the lab batch is internally inconsistent (duplicate ids, inverted shifts)."""

    pass


class InvalidConfigError(Exception):
    """Raised when the scheduler configuration tables reference unknown urgency classes or specialties."""

    pass


class FileReadingError(Exception):
    """Raised when there is an error reading a file."""

    pass


class FileContentError(Exception):
    """Raised when the content of a file is not as expected."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    InvalidTimeFormatError: 400,
    UnmappedAnalysisTypeError: 422,
    InputMismatchError: 400,
    InvalidConfigError: 500,
    FileReadingError: 500,
    FileContentError: 400,
}
