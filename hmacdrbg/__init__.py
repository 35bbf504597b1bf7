__version__ = "0.1.0"

from hmacdrbg.drbg import RESEED_INTERVAL, HmacDrbg
from hmacdrbg.exceptions import DrbgError, InsufficientEntropy, ReseedRequired, UnsupportedHashVariant
from hmacdrbg.hasher import HashVariant, Hasher
