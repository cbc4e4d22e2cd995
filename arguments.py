import os
import re
from enum import Enum


class ImageKind(Enum):
    PNG = ('png', 0, 9, 2)
    JPEG = ('jpeg', 0, 100, 80)

    def __init__(self, label, min_level, max_level, default_level):
        self.label = label
        self.min_level = min_level
        self.max_level = max_level
        self.default_level = default_level

    @staticmethod
    def from_path(path):
        return extension_to_kind.get(get_extension(path))

    def resolve_level(self, level):
        """
        Picks the level the codec should use for this kind of image

        :param level: integer given on the command line or None
        :return: level itself if it is within range, otherwise the default
        """
        if level is None:
            return self.default_level

        if level < self.min_level or level > self.max_level:
            return self.default_level

        return level


extension_to_kind = {
    '.png': ImageKind.PNG,
    '.jpg': ImageKind.JPEG,
    '.jpeg': ImageKind.JPEG
}


USAGE_MESSAGE = (
    'Please provide either 2 or 3 arguments in the order : input image path, '
    'output image path, quality percentage or zliblevel depending on .jpeg '
    'or .png!'
)

INVALID_INPUT_MESSAGE = (
    'Please provide path to a valid .png,.jpg or a .jpeg input image file'
)

INVALID_LEVEL_MESSAGE = (
    'Please provide an integer quality between {} and {} for .jpg/.jpeg '
    'images or a zlib compression level between {} and {} for .png images'
).format(ImageKind.JPEG.min_level, ImageKind.JPEG.max_level,
         ImageKind.PNG.min_level, ImageKind.PNG.max_level)


class UsageError(Exception):
    pass


class InvocationArgs:
    def __init__(self, input_path, output_path, level=None):
        self.input_path = input_path
        self.output_path = output_path
        self.level = level
        self.kind = ImageKind.from_path(input_path)

    @staticmethod
    def from_strings(input_path, output_path, level=None):
        input_path = os.path.abspath(input_path)
        output_path = os.path.abspath(output_path)

        if not is_valid_png_or_jpeg(input_path):
            raise UsageError(INVALID_INPUT_MESSAGE)

        if level is not None:
            level = parse_level(level)

        return InvocationArgs(input_path, output_path, level)

    def resolved_level(self):
        return self.kind.resolve_level(self.level)


def get_extension(path):
    return os.path.splitext(path)[1].lower()


def is_valid_png_or_jpeg(path):
    if not os.path.isfile(path):
        return False

    return get_extension(path) in extension_to_kind


level_pattern = re.compile(r"[+-]?[0-9]+")


def parse_level(s):
    s = s.strip()
    if not level_pattern.fullmatch(s):
        raise UsageError(INVALID_LEVEL_MESSAGE)

    return int(s)
