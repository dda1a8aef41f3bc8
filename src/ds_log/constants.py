"""
ds_log shared constants

Column layout, banner width and file naming conventions.
"""

# =============================================================================
# Table layout
# =============================================================================
ELAPSED_COLUMN_WIDTH = 14
LEVEL_COLUMN_WIDTH = 13
MESSAGE_COLUMN_WIDTH = 12
BANNER_WIDTH = 72
BANNER_CHAR = '-'

HEADER_TITLE = 'Start of log'
COLUMN_TITLES = ('ELAPSED TIME', 'ERROR LEVEL', 'MESSAGE')
CLOSE_NOTICE = 'Log buffer closed'

# =============================================================================
# File naming
# =============================================================================
LOGS_EXTENSION = 'qdslog'
LOGS_SUBDIR = 'Logs'
MIRROR_FILENAME = 'QDriverStation.log'
SEQUENCE_DIGITS = 4

FILENAME_TIMESTAMP_FORMAT = '(%b %d %Y - %H_%M_%S)'   # (MMM dd yyyy - HH_mm_ss)
CREATED_TIMESTAMP_FORMAT = '%b %d %Y - %H:%M:%S %p'   # MMM dd yyyy - HH:mm:ss AP

# =============================================================================
# Defaults
# =============================================================================
DEFAULT_APP_NAME = 'QDriverStation'
DEFAULT_APP_VERSION = '0.1.0'
