class AocfetchError(Exception):
    """base exception for this package"""


class MissingParameter(AocfetchError):
    """year or day is needed to build the puzzle url"""


class MissingSessionError(AocfetchError):
    """no session cookie was found in the environment or config dir"""


class TransportError(AocfetchError):
    """the request never got an http response (dns, refused connection, timeout)"""


class RemoteRequestFailed(AocfetchError):
    """the server answered with a non-2xx status"""

    def __init__(self, status, url):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status} at {url}")
