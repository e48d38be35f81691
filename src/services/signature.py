"""Webhook request signature verification.

Facebook signs every webhook POST with the app secret and sends the digest
in the ``x-hub-signature`` header as ``sha1=<hexdigest>``. The digest covers
the raw body bytes, so verification has to happen before JSON decoding.
"""

import hashlib
import hmac

import logfire


class SignatureMismatchError(Exception):
    """Raised when a request's signature does not match its body."""

    pass


class SignatureVerifier:
    """Verify ``x-hub-signature`` headers against the app secret.

    A missing header is tolerated: it is logged and the request proceeds
    unverified. A present but wrong signature raises SignatureMismatchError.
    """

    def __init__(self, app_secret: str):
        if not app_secret:
            raise ValueError("app_secret is required")
        self._secret = app_secret.encode("utf-8")

    def expected_signature(self, raw_body: bytes) -> str:
        """Hex HMAC-SHA1 digest of the raw body."""
        return hmac.new(self._secret, raw_body, hashlib.sha1).hexdigest()

    def header_for(self, raw_body: bytes) -> str:
        """Header value Facebook would send for this body."""
        return f"sha1={self.expected_signature(raw_body)}"

    def verify(self, raw_body: bytes, signature_header: str | None) -> bool:
        """Check a request body against its signature header.

        Args:
            raw_body: Request body exactly as received
            signature_header: Value of the x-hub-signature header, if any

        Returns:
            True if the signature was checked and matched, False if the
            header was absent and verification was skipped

        Raises:
            SignatureMismatchError: if the header is present but the digest
                does not match
        """
        if not signature_header:
            logfire.error(
                "Couldn't validate the signature: header missing",
                body_length=len(raw_body),
            )
            return False

        # Only the digest is compared; the method tag is not used to pick
        # the algorithm.
        method, _, signature_hash = signature_header.partition("=")
        expected_hash = self.expected_signature(raw_body)

        if not hmac.compare_digest(
            signature_hash.encode("utf-8"), expected_hash.encode("utf-8")
        ):
            logfire.error(
                "Request signature mismatch",
                method=method,
                body_length=len(raw_body),
            )
            raise SignatureMismatchError("Couldn't validate the request signature.")

        return True
