import io
import json
import unittest

from body_helpers import SAMPLE_BODY, TrackingStream, gzip_compress, zstd_compress
from lazy_decompress import HttpResponse, decompress_body, stream_json_dict


class TestJsonBody(unittest.TestCase):

    def test_plain_body(self):
        result = stream_json_dict(io.BytesIO(SAMPLE_BODY))
        self.assertEqual(result, json.loads(SAMPLE_BODY))

    def test_gzip_body(self):
        response = HttpResponse(body=TrackingStream(gzip_compress(SAMPLE_BODY)), headers={"Content-Encoding": "gzip"})
        decompress_body(response)

        keys = list(stream_json_dict(response.body).keys())

        self.assertIn("feature_gates", keys)
        self.assertIn("dynamic_configs", keys)
        self.assertIn("layer_configs", keys)

    def test_decimals_become_floats(self):
        response = HttpResponse(body=TrackingStream(zstd_compress(SAMPLE_BODY)), headers={"Content-Encoding": "zstd"})
        decompress_body(response)

        result = stream_json_dict(response.body)

        threshold = result["dynamic_configs"]["threshold"]
        self.assertIsInstance(threshold, float)
        self.assertEqual(threshold, 0.25)


if __name__ == "__main__":
    unittest.main()
