"""Constants for gitcas."""

# Top-level directory for loose objects inside a store
OBJECTS_DIR = "objects"

# Number of hex characters used for the fan-out directory
FANOUT_PREFIX_LENGTH = 2

# Hex lengths of the supported digests
SHA1_HEX_LENGTH = 40
SHA256_HEX_LENGTH = 64

# zlib default (-1) produces the same 0x78 0x9c header git writes
DEFAULT_COMPRESSION_LEVEL = -1

# Configuration file looked up in the working directory
CONFIG_FILE = "gitcas.yaml"

# Application name used for platform data directories
APP_NAME = "gitcas"
