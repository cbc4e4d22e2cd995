import logging
import codec
from arguments import ImageKind


logger = logging.getLogger(__name__)


class Compressor:
    def __init__(self, level):
        self.level = level

    def compress(self, input_path, output_path):
        """
        Re-encodes the image at input_path and writes it to output_path

        Codec failures are logged rather than raised.

        :return: False if the codec failed, True otherwise
        """
        try:
            data = codec.read_file(input_path)
            compressed = self.encode(data)
            codec.write_file(compressed, output_path)
        except codec.CodecError as e:
            logger.error('Error : %s', e)
            return False

        logger.info('%s: %d bytes -> %s: %d bytes', input_path, len(data),
                    output_path, len(compressed))
        return True

    def encode(self, data):
        raise NotImplementedError


class JpegCompressor(Compressor):
    def encode(self, data):
        im = codec.decode(data)
        return codec.encode_jpeg(im, quality=self.level,
                                 subsampling=codec.FULL_CHROMA)


class PngCompressor(Compressor):
    def encode(self, data):
        normalized = codec.encode_png(codec.decode(data))
        return codec.encode_png(codec.decode(normalized),
                                compression_level=self.level)


kind_to_compressor = {
    ImageKind.JPEG: JpegCompressor,
    ImageKind.PNG: PngCompressor
}


def compressor_for(kind, level):
    return kind_to_compressor[kind](level)
