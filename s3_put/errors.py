class S3PutError(Exception):
    code = "S3PUT_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidConfiguration(S3PutError):
    code = "INVALID_CONFIGURATION"


class InvalidReference(S3PutError):
    code = "INVALID_REFERENCE"


class UnresolvedArtifact(S3PutError):
    code = "UNRESOLVED_ARTIFACT"


class UnresolvedResource(S3PutError):
    code = "UNRESOLVED_RESOURCE"


class NotFound(UnresolvedResource):
    code = "NOT_FOUND"


class MemberNotFound(UnresolvedResource):
    code = "MEMBER_NOT_FOUND"


class MissingField(S3PutError):
    code = "MISSING_FIELD"


class WriteFailed(S3PutError):
    code = "WRITE_FAILED"
