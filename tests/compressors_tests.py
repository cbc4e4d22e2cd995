import unittest
import os
import sys
import tempfile
import numpy as np
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

import codec
from arguments import ImageKind
from compressors import JpegCompressor, PngCompressor, compressor_for
from images import save_jpeg, save_png, pixels


class CompressorsTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def path(self, name):
        return os.path.join(self.dir, name)

    def test_lookup_by_kind(self):
        jpeg = compressor_for(ImageKind.JPEG, 50)
        png = compressor_for(ImageKind.PNG, 9)
        self.assertIsInstance(jpeg, JpegCompressor)
        self.assertIsInstance(png, PngCompressor)
        self.assertEqual(jpeg.level, 50)
        self.assertEqual(png.level, 9)

    def test_jpeg_compressor(self):
        src = save_jpeg(self.path('in.jpg'), 256, 256, quality=100)
        out = self.path('out.jpg')

        self.assertTrue(JpegCompressor(30).compress(src, out))

        expected = codec.encode_jpeg(codec.decode(codec.read_file(src)),
                                     quality=30)
        self.assertEqual(codec.read_file(out), expected)
        self.assertLess(os.path.getsize(out), os.path.getsize(src))

    def test_png_compressor_keeps_pixels(self):
        src = save_png(self.path('in.png'), 256, 256)
        out = self.path('out.png')

        self.assertTrue(PngCompressor(9).compress(src, out))

        self.assertEqual(codec.decode(codec.read_file(out)).format, 'PNG')
        self.assertTrue(np.array_equal(pixels(src), pixels(out)))
        self.assertLess(os.path.getsize(out), os.path.getsize(src))

    def test_output_is_overwritten(self):
        src = save_png(self.path('in.png'))
        out = self.path('out.png')
        with open(out, 'wb') as f:
            f.write(b'old contents')

        self.assertTrue(PngCompressor(2).compress(src, out))
        self.assertTrue(np.array_equal(pixels(src), pixels(out)))

    def test_codec_errors_are_logged_not_raised(self):
        src = self.path('broken.jpg')
        with open(src, 'wb') as f:
            f.write(b'not a jpeg at all')
        out = self.path('out.jpg')

        with self.assertLogs('compressors', level='ERROR') as cm:
            self.assertFalse(JpegCompressor(80).compress(src, out))

        self.assertTrue(cm.output[0].startswith('ERROR:compressors:Error : '))
        self.assertFalse(os.path.exists(out))

    def test_unwritable_output_is_a_codec_error(self):
        src = save_png(self.path('in.png'))
        out = self.path(os.path.join('missing', 'out.png'))

        with self.assertLogs('compressors', level='ERROR'):
            self.assertFalse(PngCompressor(2).compress(src, out))
