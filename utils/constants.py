"""BlurHash format constants."""

from types import MappingProxyType

# Base-83 digit order; a character's index is its digit value.
BASE83_ALPHABET = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz#$%*+,-.:;=?@[]^_{|}~"
)
BASE83_LOOKUP = MappingProxyType({char: i for i, char in enumerate(BASE83_ALPHABET)})
BASE = len(BASE83_ALPHABET)

MIN_TOKEN_LENGTH = 6
MAX_COMPONENTS = 9

# Token layout: size flag, max AC, 4-char DC, then 2 chars per AC term.
DC_LENGTH = 4
AC_LENGTH = 2

# AC terms pack three base-19 digits (19**3 <= 83**2).
AC_QUANT_LEVELS = 19
AC_QUANT_CENTER = 9
MAX_QUANTIZED_AC = 82
MAX_AC_DIVISOR = 166.0

DEFAULT_COMPONENTS_X = 4
DEFAULT_COMPONENTS_Y = 3
DEFAULT_PREVIEW_SIZE = 32
PLACEHOLDER_MAX_HEIGHT = 80


def expected_token_length(num_x: int, num_y: int) -> int:
    """Token length implied by a component grid."""
    return 4 + 2 * num_x * num_y
