import logging
from enum import StrEnum

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    HTTPClientError,
    IncompleteReadError,
    InvalidRegionError,
    NoCredentialsError,
    ParamValidationError,
    PartialCredentialsError,
    ProxyConnectionError,
    SSLError,
)

logger = logging.getLogger(__name__)


class ErrorKind(StrEnum):
    """
    Normalized classification of a failed invocation.

    * **TRANSPORT:** The service could not be reached, or the body was cut short.
    * **AUTHORIZATION:** Credentials are missing, expired, or lack permission.
    * **NOT_FOUND:** The referenced table, stream, bucket, key or lexicon is absent.
    * **VALIDATION:** Malformed or missing input, caught locally or by the service.
    * **IO:** The local filesystem failed while reading input or writing output.
    * **UNKNOWN:** Any remote failure not covered above.
    """

    TRANSPORT = "TRANSPORT"
    AUTHORIZATION = "AUTHORIZATION"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    IO = "IO"
    UNKNOWN = "UNKNOWN"


class ServiceError(Exception):
    def __init__(self, kind: ErrorKind, message: str, code: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return (
            f"ServiceError(kind={self.kind!s}, code={self.code!r}, "
            f"message={self.message!r})"
        )


AUTHORIZATION_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnrecognizedClientException",
    "InvalidClientTokenId",
    "InvalidAccessKeyId",
    "ExpiredToken",
    "ExpiredTokenException",
    "SignatureDoesNotMatch",
    "MissingAuthenticationToken",
    "IncompleteSignature",
    "AuthFailure",
}

NOT_FOUND_CODES = {
    "ResourceNotFoundException",
    "ResourceNotFound",
    "NoSuchBucket",
    "NoSuchKey",
    "NotFound",
    "LexiconNotFoundException",
    "NotFoundException",
}

VALIDATION_CODES = {
    "ValidationException",
    "ValidationError",
    "InvalidParameterValue",
    "InvalidParameterValueException",
    "InvalidParameterCombination",
    "InvalidArgumentException",
    "InvalidBucketName",
    "InvalidLexiconException",
    "InvalidSsmlException",
    "TextLengthExceededException",
    "UnsupportedPlsAlphabetException",
    "UnsupportedPlsLanguageException",
    "LexiconSizeExceededException",
    "MaxLexemeLengthExceededException",
    "BucketNotEmpty",
    "ResourceInUseException",
    "InvalidCiphertextException",
    "IncorrectKeyException",
    "DisabledException",
}

TRANSPORT_ERRORS = (
    EndpointConnectionError,
    ConnectTimeoutError,
    ProxyConnectionError,
    SSLError,
    HTTPClientError,
    IncompleteReadError,
)


def _classify_client_error(error: ClientError) -> ErrorKind:
    error_code = error.response.get("Error", {}).get("Code", "Unknown")
    status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")

    if error_code in AUTHORIZATION_CODES or status in (401, 403):
        return ErrorKind.AUTHORIZATION
    if error_code in NOT_FOUND_CODES or status == 404:
        return ErrorKind.NOT_FOUND
    if error_code in VALIDATION_CODES:
        return ErrorKind.VALIDATION
    return ErrorKind.UNKNOWN


def classify_error(error: Exception) -> ServiceError:
    """
    Maps a provider or local exception onto the ServiceError taxonomy.

    An existing ServiceError is returned unchanged.
    """
    if isinstance(error, ServiceError):
        return error

    if isinstance(error, ClientError):
        error_code = error.response.get("Error", {}).get("Code", "Unknown")
        kind = _classify_client_error(error)
        return ServiceError(kind, str(error), code=error_code)

    if isinstance(error, (NoCredentialsError, PartialCredentialsError)):
        return ServiceError(ErrorKind.AUTHORIZATION, str(error))

    if isinstance(error, (ParamValidationError, InvalidRegionError)):
        return ServiceError(ErrorKind.VALIDATION, str(error))

    if isinstance(error, TRANSPORT_ERRORS):
        return ServiceError(ErrorKind.TRANSPORT, str(error))

    if isinstance(error, OSError):
        return ServiceError(ErrorKind.IO, str(error) or type(error).__name__)

    if isinstance(error, BotoCoreError):
        return ServiceError(ErrorKind.UNKNOWN, str(error))

    logger.debug("Unclassified error type %s", type(error).__name__)
    return ServiceError(ErrorKind.UNKNOWN, str(error) or type(error).__name__)
