import io
import unittest

import requests
from requests.structures import CaseInsensitiveDict

from body_helpers import SAMPLE_BODY, brotli_compress, gzip_compress
from lazy_decompress import BrotliReader, GzipReader, HttpResponse, decompress_requests_response
from lazy_decompress.http_response import parse_content_length


def make_requests_response(body: bytes, headers: dict) -> requests.Response:
    response = requests.Response()
    response.status_code = 200
    response.headers = CaseInsensitiveDict(headers)
    response.raw = io.BytesIO(body)
    return response


class TestHttpResponse(unittest.TestCase):

    def test_dict_headers_become_case_insensitive(self):
        response = HttpResponse(body=io.BytesIO(b""), headers={"content-encoding": "gzip"})
        self.assertIsInstance(response.headers, CaseInsensitiveDict)
        self.assertEqual(response.headers.get("Content-Encoding"), "gzip")

    def test_from_requests(self):
        compressed = gzip_compress(SAMPLE_BODY)
        raw_response = make_requests_response(
            compressed, {"Content-Encoding": "gzip", "Content-Length": str(len(compressed))}
        )

        response = HttpResponse.from_requests(raw_response)

        self.assertIs(response.body, raw_response.raw)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content_length, len(compressed))
        self.assertFalse(response.uncompressed)
        self.assertEqual(response.read(), compressed)

    def test_decompress_requests_response(self):
        compressed = brotli_compress(SAMPLE_BODY)
        raw_response = make_requests_response(
            compressed, {"content-encoding": "br", "content-length": str(len(compressed))}
        )

        response = decompress_requests_response(raw_response)

        self.assertIsInstance(response.body, BrotliReader)
        self.assertTrue(response.uncompressed)
        self.assertEqual(response.content_length, -1)
        self.assertNotIn("Content-Length", response.headers)
        self.assertEqual(b"".join(response.iter_content(64)), SAMPLE_BODY)

    def test_original_requests_headers_untouched(self):
        compressed = gzip_compress(SAMPLE_BODY)
        raw_response = make_requests_response(compressed, {"Content-Encoding": "gzip"})

        response = decompress_requests_response(raw_response)

        self.assertIsInstance(response.body, GzipReader)
        self.assertEqual(raw_response.headers["Content-Encoding"], "gzip")

    def test_close(self):
        raw = io.BytesIO(gzip_compress(SAMPLE_BODY))
        response = HttpResponse(body=raw, headers={"Content-Encoding": "gzip"})
        with response:
            pass
        self.assertTrue(raw.closed)

    def test_parse_content_length(self):
        self.assertEqual(parse_content_length("42"), 42)
        self.assertEqual(parse_content_length(" 7 "), 7)
        self.assertEqual(parse_content_length("0"), 0)
        self.assertEqual(parse_content_length(None), -1)
        self.assertEqual(parse_content_length("abc"), -1)
        self.assertEqual(parse_content_length("-5"), -1)


if __name__ == "__main__":
    unittest.main()
