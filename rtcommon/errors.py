"""Error codes shared by the whole stack and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum

# Each block starts at a fixed value; the codes inside a block follow on
# from one another.
_BLOCKS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (0, (
        "NO_ERROR",
        "FAILURE",
        "INVALID_PARAMETER",
        "PARAMETER_OUT_OF_RANGE",
        "BAD_CRC",
        "BAD_BLOCK",
        "INVALID_RECIPIENT",
        "INVALID_INTERFACE",
        "INVALID_ENDPOINT",
        "INVALID_ALT_SETTING",
        "UNSUPPORTED_REQUEST",
        "UNSUPPORTED_CONFIGURATION",
        "UNSUPPORTED_FEATURE",
        "ENDPOINT_BUSY",
        "USB_RESET",
        "ABORTED",
    )),
    (100, (
        "OUT_OF_MEMORY",
        "OUT_OF_RESOURCES",
        "INVALID_REQUEST",
        "NOT_IMPLEMENTED",
        "VERSION_NOT_SUPPORTED",
        "INVALID_SYNTAX",
        "AUTHENTICATION_FAILED",
        "UNEXPECTED_RESPONSE",
        "INVALID_RESPONSE",
        "UNEXPECTED_VALUE",
        "WAIT_CANCELED",
    )),
    (200, (
        "OPEN_FAILED",
        "CONNECTION_FAILED",
        "CONNECTION_REFUSED",
        "CONNECTION_CLOSING",
        "CONNECTION_RESET",
        "NOT_CONNECTED",
        "ALREADY_CLOSED",
        "ALREADY_CONNECTED",
        "INVALID_SOCKET",
        "PROTOCOL_UNREACHABLE",
        "PORT_UNREACHABLE",
        "INVALID_FRAME",
        "INVALID_HEADER",
        "WRONG_CHECKSUM",
        "WRONG_IDENTIFIER",
        "WRONG_CLIENT_ID",
        "WRONG_SERVER_ID",
        "WRONG_COOKIE",
        "NO_RESPONSE",
        "RECEIVE_QUEUE_FULL",
        "TIMEOUT",
        "WOULD_BLOCK",
        "INVALID_NAME",
        "INVALID_OPTION",
        "UNEXPECTED_STATE",
        "INVALID_COMMAND",
        "INVALID_PROTOCOL",
        "INVALID_STATUS",
        "INVALID_ADDRESS",
        "INVALID_PORT",
        "INVALID_MESSAGE",
        "INVALID_KEY",
        "INVALID_KEY_LENGTH",
        "INVALID_EPOCH",
        "INVALID_SEQUENCE_NUMBER",
        "INVALID_CHARACTER",
        "INVALID_LENGTH",
        "INVALID_PADDING",
        "INVALID_MAC",
        "INVALID_TAG",
        "INVALID_TYPE",
        "INVALID_VALUE",
        "INVALID_CLASS",
        "INVALID_VERSION",
        "INVALID_PIN_CODE",
        "WRONG_LENGTH",
        "WRONG_TYPE",
        "WRONG_ENCODING",
        "WRONG_VALUE",
        "INCONSISTENT_VALUE",
        "UNSUPPORTED_TYPE",
        "UNSUPPORTED_ALGO",
        "UNSUPPORTED_CIPHER_SUITE",
        "UNSUPPORTED_CIPHER_MODE",
        "UNSUPPORTED_CIPHER_ALGO",
        "UNSUPPORTED_HASH_ALGO",
        "UNSUPPORTED_KEY_EXCH_ALGO",
        "UNSUPPORTED_SIGNATURE_ALGO",
        "UNSUPPORTED_ELLIPTIC_CURVE",
        "INVALID_ELLIPTIC_CURVE",
        "INVALID_SIGNATURE_ALGO",
        "CERTIFICATE_REQUIRED",
        "MESSAGE_TOO_LONG",
        "OUT_OF_RANGE",
        "MESSAGE_DISCARDED",
        "INVALID_PACKET",
        "BUFFER_EMPTY",
        "BUFFER_OVERFLOW",
        "BUFFER_UNDERFLOW",
        "INVALID_RESOURCE",
        "INVALID_PATH",
        "NOT_FOUND",
        "ACCESS_DENIED",
        "NOT_WRITABLE",
        "AUTH_REQUIRED",
        "TRANSMITTER_BUSY",
        "NO_RUNNING",
    )),
    (300, (
        "INVALID_FILE",
        "FILE_NOT_FOUND",
        "FILE_OPENING_FAILED",
        "FILE_READING_FAILED",
        "END_OF_FILE",
        "UNEXPECTED_END_OF_FILE",
        "UNKNOWN_FILE_FORMAT",
        "INVALID_DIRECTORY",
        "DIRECTORY_NOT_FOUND",
    )),
    (400, (
        "FILE_SYSTEM_NOT_SUPPORTED",
        "UNKNOWN_FILE_SYSTEM",
        "INVALID_FILE_SYSTEM",
        "INVALID_BOOT_SECTOR_SIGNATURE",
        "INVALID_SECTOR_SIZE",
        "INVALID_CLUSTER_SIZE",
        "INVALID_FILE_RECORD_SIZE",
        "INVALID_INDEX_BUFFER_SIZE",
        "INVALID_VOLUME_DESCRIPTOR_SIGNATURE",
        "INVALID_VOLUME_DESCRIPTOR",
        "INVALID_FILE_RECORD",
        "INVALID_INDEX_BUFFER",
        "INVALID_DATA_RUNS",
        "WRONG_TAG_IDENTIFIER",
        "WRONG_TAG_CHECKSUM",
        "WRONG_MAGIC_NUMBER",
        "WRONG_SEQUENCE_NUMBER",
        "DESCRIPTOR_NOT_FOUND",
        "ATTRIBUTE_NOT_FOUND",
        "RESIDENT_ATTRIBUTE",
        "NOT_RESIDENT_ATTRIBUTE",
        "INVALID_SUPER_BLOCK",
        "INVALID_SUPER_BLOCK_SIGNATURE",
        "INVALID_BLOCK_SIZE",
        "UNSUPPORTED_REVISION_LEVEL",
        "INVALID_INODE_SIZE",
        "INODE_NOT_FOUND",
    )),
    (500, (
        "UNEXPECTED_MESSAGE",
        "URL_TOO_LONG",
        "QUERY_STRING_TOO_LONG",
        "NO_ADDRESS",
        "NO_BINDING",
        "NOT_ON_LINK",
        "USE_MULTICAST",
        "NAK_RECEIVED",
        "EXCEPTION_RECEIVED",
        "NO_CARRIER",
        "INVALID_LEVEL",
        "WRONG_STATE",
        "END_OF_STREAM",
        "LINK_DOWN",
        "INVALID_OPTION_LENGTH",
        "IN_PROGRESS",
        "NO_ACK",
        "INVALID_METADATA",
        "NOT_CONFIGURED",
        "ALREADY_CONFIGURED",
        "NAME_RESOLUTION_FAILED",
        "NO_ROUTE",
        "WRITE_FAILED",
        "READ_FAILED",
        "UPLOAD_FAILED",
        "READ_ONLY_ACCESS",
        "INVALID_SIGNATURE",
        "INVALID_TICKET",
        "NO_TICKET",
        "BAD_RECORD_MAC",
        "RECORD_OVERFLOW",
        "HANDSHAKE_FAILED",
        "NO_CERTIFICATE",
        "BAD_CERTIFICATE",
        "UNSUPPORTED_CERTIFICATE",
        "UNKNOWN_CERTIFICATE",
        "CERTIFICATE_EXPIRED",
        "CERTIFICATE_REVOKED",
        "UNKNOWN_CA",
        "DECODING_FAILED",
        "DECRYPTION_FAILED",
        "ILLEGAL_PARAMETER",
        "MISSING_EXTENSION",
        "UNSUPPORTED_EXTENSION",
        "INAPPROPRIATE_FALLBACK",
        "NO_APPLICATION_PROTOCOL",
        "MORE_DATA_REQUIRED",
        "TLS_NOT_SUPPORTED",
        "PRNG_NOT_READY",
        "SERVICE_CLOSING",
        "INVALID_TIMESTAMP",
        "NO_DNS_SERVER",
        "OBJECT_NOT_FOUND",
        "INSTANCE_NOT_FOUND",
        "ADDRESS_NOT_FOUND",
        "UNKNOWN_IDENTITY",
        "UNKNOWN_ENGINE_ID",
        "UNKNOWN_USER_NAME",
        "UNKNOWN_CONTEXT",
        "UNAVAILABLE_CONTEXT",
        "UNSUPPORTED_SECURITY_LEVEL",
        "NOT_IN_TIME_WINDOW",
        "AUTHORIZATION_FAILED",
        "INVALID_FUNCTION_CODE",
        "DEVICE_BUSY",
        "REQUEST_REJECTED",
        "INVALID_CHANNEL",
        "INVALID_GROUP",
        "UNKNOWN_SERVICE",
        "UNKNOWN_REQUEST",
        "FLOW_CONTROL",
        "INVALID_PASSWORD",
        "INVALID_HANDLE",
        "BAD_NONCE",
        "UNEXPECTED_STATUS",
        "RESPONSE_TOO_LARGE",
        "INVALID_SESSION",
        "TICKET_EXPIRED",
        "INVALID_ENTRY",
        "TABLE_FULL",
        "END_OF_TABLE",
        "ALREADY_RUNNING",
        "UNKNOWN_KEY",
        "UNKNOWN_TYPE",
        "UNSUPPORTED_OPTION",
        "INVALID_SPI",
        "RETRY",
        "POLICY_FAILURE",
        "INVALID_PROPOSAL",
        "INVALID_SELECTOR",
        "WRONG_NONCE",
        "WRONG_ISSUER",
        "RESPONSE_EXPIRED",
        "CRL_EXPIRED",
        "NO_MATCH",
        "PARTIAL_MATCH",
    )),
)


def _members() -> list[tuple[str, int]]:
    members: list[tuple[str, int]] = []
    seen: set[int] = set()
    for start, names in _BLOCKS:
        for value, name in enumerate(names, start):
            if value in seen:
                raise RuntimeError(f"error code {value} assigned twice")
            seen.add(value)
            members.append((name, value))
    return members


ErrorCode = IntEnum("ErrorCode", _members(), module=__name__, qualname="ErrorCode")
ErrorCode.__doc__ = "Numeric error codes, grouped in blocks of one hundred."


class StackError(Exception):
    """An error that carries one of the stack's error codes."""

    def __init__(self, code, message=None):
        self.code = ErrorCode(code)
        self.message = message or self.code.name.lower().replace("_", " ")
        super().__init__(self.message)