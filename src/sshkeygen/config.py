import os
import socket
from dotenv import load_dotenv

load_dotenv()

# Algorithm/size defaults. 1024-bit DSA is the historical default of the
# key-generator module; override via env where a stronger policy is wanted.
DEFAULT_KEY_TYPE = os.getenv("SSHKEYGEN_DEFAULT_KEY_TYPE", "dsa").strip().lower()
DEFAULT_KEY_BITS = int(os.getenv("SSHKEYGEN_DEFAULT_KEY_BITS", "1024"))
MAX_KEY_BITS = int(os.getenv("SSHKEYGEN_MAX_KEY_BITS", "16384"))
DEFAULT_USERNAME = os.getenv("SSHKEYGEN_DEFAULT_USERNAME", "backup-user@" + socket.gethostname())

# Download handle prefix understood by the SSH backend's keyfile option
KEYFILE_URI = os.getenv("SSHKEYGEN_KEYFILE_URI", "sshkey://")

LOG_LEVEL = os.getenv("SSHKEYGEN_LOG_LEVEL", "INFO").upper()
