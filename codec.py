import io
import os
from contextlib import suppress
from PIL import Image


FULL_CHROMA = '4:4:4'

jpeg_modes = ('L', 'RGB', 'CMYK')


class CodecError(Exception):
    pass


def read_file(path):
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise CodecError('cannot read {}: {}'.format(path, e)) from e


def write_file(data, path):
    try:
        f = open(path, 'wb')
    except OSError as e:
        raise CodecError('cannot write {}: {}'.format(path, e)) from e

    try:
        with f:
            f.write(data)
    except OSError as e:
        # a partial image is worse than none
        with suppress(FileNotFoundError):
            os.remove(path)
        raise CodecError('cannot write {}: {}'.format(path, e)) from e


def decode(data):
    """
    Turns encoded image bytes into a fully loaded image

    Any failure inside Pillow, including DecompressionBombError for
    oversized images, is raised as CodecError.

    :param data: contents of a PNG or JPEG file
    :return: instance of PIL.Image.Image
    """
    try:
        im = Image.open(io.BytesIO(data))
        im.load()
    except Exception as e:
        raise CodecError(str(e)) from e

    return im


def encode_png(im, compression_level=6):
    return _encode(im, 'PNG', compress_level=compression_level)


def encode_jpeg(im, quality, subsampling=FULL_CHROMA):
    return _encode(im, 'JPEG', quality=quality, subsampling=subsampling)


def _encode(im, fmt, **params):
    buffer = io.BytesIO()
    try:
        if fmt == 'JPEG' and im.mode not in jpeg_modes:
            im = im.convert('RGB')
        im.save(buffer, format=fmt, **params)
    except Exception as e:
        raise CodecError(str(e)) from e

    return buffer.getvalue()
