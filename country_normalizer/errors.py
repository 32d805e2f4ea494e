class CountryNormalizerError(Exception):
    """Base class for country normalizer errors."""


class DataParseError(CountryNormalizerError):
    """The country dataset or rule table is malformed."""


class DataIOError(CountryNormalizerError):
    """The country dataset could not be read."""
