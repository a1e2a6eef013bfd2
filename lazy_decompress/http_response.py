from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Union

import requests
from requests.structures import CaseInsensitiveDict

from .body_decompressor import decompress_body
from .constants import Const
from .decompress_options import DEFAULT_READ_CHUNK_SIZE, DecompressOptions


@dataclass
class HttpResponse:
    body: Any
    headers: Union[CaseInsensitiveDict, Dict[str, str]] = field(default_factory=CaseInsensitiveDict)
    uncompressed: bool = False
    content_length: int = Const.UNKNOWN_CONTENT_LENGTH
    status_code: Optional[int] = None
    url: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers or {})

    @classmethod
    def from_requests(cls, response: requests.Response) -> "HttpResponse":
        """
        Wraps a requests response opened with stream=True.
        response.raw is read as-is, so the body is still encoded.
        """
        headers = CaseInsensitiveDict(response.headers)
        return cls(
            body=response.raw,
            headers=headers,
            content_length=parse_content_length(headers.get(Const.CONTENT_LENGTH_HEADER)),
            status_code=response.status_code,
            url=response.url,
        )

    def read(self, size: Optional[int] = -1) -> bytes:
        return self.body.read(size)

    def iter_content(self, chunk_size: int = DEFAULT_READ_CHUNK_SIZE) -> Iterator[bytes]:
        while True:
            chunk = self.body.read(chunk_size)
            if not chunk:
                return
            yield chunk

    def close(self):
        self.body.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def parse_content_length(value: Optional[str]) -> int:
    if value is None:
        return Const.UNKNOWN_CONTENT_LENGTH
    try:
        length = int(value.strip())
    except ValueError:
        return Const.UNKNOWN_CONTENT_LENGTH
    if length < 0:
        return Const.UNKNOWN_CONTENT_LENGTH
    return length


def decompress_requests_response(
        response: requests.Response, options: Optional[DecompressOptions] = None
) -> HttpResponse:
    result = HttpResponse.from_requests(response)
    decompress_body(result, options)
    return result
