"""Core constants used across naifuru modules.

This module centralizes file-layout offsets, defaults, and exit codes.
Keeping values here avoids magic literals in decoding logic.
"""

from __future__ import annotations

DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("error", "info", "debug")
DEFAULT_TEXT_ENCODING = "utf-8"
ANALYSIS_CONFIG_EXTENSIONS = ("toml",)

EXIT_CODE_SUCCESS = 0
EXIT_CODE_DEFAULT = 1
EXIT_CODE_CLI = 2
EXIT_CODE_CONFIG_VALIDATION = 3
EXIT_CODE_IO = 4
EXIT_CODE_CONFIG_PARSE = 5
EXIT_CODE_EXTRACTION = 6

SAC_WORD_SIZE = 4
SAC_HEADER_WORDS = 158
SAC_UNDEFINED_VALUE = -12345
SAC_VALID_VERSIONS = (6, 7)
SAC_DELTA_MIN_EXCLUSIVE = 0.001
SAC_DELTA_MAX_EXCLUSIVE = 10.0
SAC_WORD_DELTA = 0
SAC_WORD_DEPMIN = 1
SAC_WORD_DEPMAX = 2
SAC_WORD_B = 5
SAC_WORD_E = 6
SAC_WORD_STLA = 31
SAC_WORD_STLO = 32
SAC_WORD_NZYEAR = 70
SAC_WORD_NZJDAY = 71
SAC_WORD_NZHOUR = 72
SAC_WORD_NZMIN = 73
SAC_WORD_NZSEC = 74
SAC_WORD_NZMSEC = 75
SAC_WORD_NVHDR = 76
SAC_WORD_NPTS = 79
SAC_WORD_IDEP = 86
SAC_WORD_KSTNM = 110
SAC_WORD_KCMPNM = 150
SAC_STRING_WORDS = 2
SAC_UNIT_LABELS = {
    -12345: "undefined",
    5: "unknown",
    6: "disp(nm)",
    7: "Vel(nm/sec)",
    8: "nm/sec/sec",
    50: "volts",
}
SAC_UNIT_NOT_FOUND = "notfound"

KNET_LINE_LATITUDE = 2
KNET_LINE_LONGITUDE = 3
KNET_LINE_STATION_CODE = 6
KNET_LINE_RECORD_TIME = 10
KNET_LINE_SAMPLING_FREQ = 11
KNET_LINE_SCALE_FACTOR = 14
KNET_HEADER_LINES = 17
KNET_UNIT_LABEL = "gal"
KNET_UTC_OFFSET_HOURS = 9
