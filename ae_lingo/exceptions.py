"""
AE Lingo Exceptions
===================
Error taxonomy shared by the image normalizer, the translation
orchestrator and the API layer.
"""


class AELingoError(Exception):
    """Base class for all AE Lingo errors."""

    code = "error"


class InvalidInputKindError(AELingoError):
    """A non-image payload was passed where an image is required."""

    code = "invalid_input_kind"


class MissingCredentialError(AELingoError):
    """The Gemini API key is absent or blank."""

    code = "missing_credential"


class TranslationServiceUnavailableError(AELingoError):
    """Transport failure, non-2xx response, or a body not matching the schema."""

    code = "service_unavailable"
