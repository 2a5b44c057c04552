import base64
import hashlib

from casebrief.upload.exceptions import EncodingFailure
from casebrief.upload.models import EncodedDocument, UploadCandidate


class DocumentEncoder:
    """Turns an accepted UploadCandidate into an inline model payload.

    The bytes are base64-encoded as-is; no conversion or compression.
    """

    def encode(self, candidate: UploadCandidate) -> EncodedDocument:
        """Encode candidate bytes together with the declared media type.

        Raises:
            EncodingFailure: if the content is missing, empty, or does not
                match the declared size.
        """
        raw = candidate.raw_bytes
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise EncodingFailure(
                f"Cannot read '{candidate.original_name}': content is not binary"
            )
        raw = bytes(raw)
        if not raw:
            raise EncodingFailure(f"Cannot read '{candidate.original_name}': file is empty")
        if len(raw) != candidate.size_bytes:
            raise EncodingFailure(
                f"Cannot read '{candidate.original_name}': expected "
                f"{candidate.size_bytes} bytes, got {len(raw)}"
            )
        return EncodedDocument(
            data=base64.b64encode(raw).decode("ascii"),
            media_type=candidate.declared_media_type.lower(),
            sha256=hashlib.sha256(raw).hexdigest(),
            original_name=candidate.original_name,
            size_bytes=len(raw),
        )
